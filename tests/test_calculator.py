import pytest

from kata.calculator import calculate


@pytest.mark.parametrize("a,b", [(2, 3), (-1.5, 4.25), (0, 7), (10, 0.5)])
def test_basic_operations(a, b):
    assert calculate("+", a, b) == pytest.approx(a + b)
    assert calculate("-", a, b) == pytest.approx(a - b)
    assert calculate("*", a, b) == pytest.approx(a * b)
    assert calculate("/", a, b) == pytest.approx(a / b)


def test_operator_whitespace_is_ignored():
    assert calculate(" + ", 1, 2) == calculate("+", 1, 2)


def test_result_is_float():
    result = calculate("+", 1, 2)
    assert isinstance(result, float) and result == pytest.approx(3.0)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="Div by Zero"):
        calculate("/", 5, 0)


@pytest.mark.parametrize("symbol", ["%", "^", "x", ""])
def test_invalid_operator(symbol):
    with pytest.raises(ValueError, match="Invalid operator"):
        calculate(symbol, 1, 2)