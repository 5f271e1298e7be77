[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kata"
version = "0.1.0"
description = "Small classic programming exercises: number theory, arrays, matrices, strings, patterns and a roulette game."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "algorithms", "kata", "education", "number-theory", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kata = "kata.cli:main"
kata-roulette = "kata.roulette:main"

[tool.hatch.build.targets.wheel]
packages = ["kata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
