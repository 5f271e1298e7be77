import pytest

from kata.patterns import floyd_triangle, half_pyramid


@pytest.mark.parametrize("rows", [1, 2, 5, 12])
def test_floyd_triangle_shape_and_numbers(rows):
    triangle = floyd_triangle(rows)
    assert [len(row) for row in triangle] == list(range(1, rows + 1))
    flat = [n for row in triangle for n in row]
    assert flat == list(range(1, len(flat) + 1))


def test_floyd_triangle_first_rows():
    assert floyd_triangle(3) == [[1], [2, 3], [4, 5, 6]]


@pytest.mark.parametrize("rows", [0, -3])
def test_empty_when_no_rows(rows):
    assert floyd_triangle(rows) == []
    assert half_pyramid(rows) == []


@pytest.mark.parametrize("rows", [1, 4, 9])
def test_half_pyramid_rows(rows):
    lines = half_pyramid(rows)
    assert len(lines) == rows
    for i, line in enumerate(lines, start=1):
        assert line.split(" ") == ["*"] * i


def test_half_pyramid_first_row():
    assert half_pyramid(2)[0] == "*"