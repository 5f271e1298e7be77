"""Small classic programming exercises: numbers, arrays, matrices, text, patterns and a roulette game."""

__version__ = "0.1.0"