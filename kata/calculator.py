"""A four-function calculator on two operands."""

from __future__ import annotations

import operator as _op

__all__ = ["calculate"]

_OPERATIONS = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}


def calculate(operator: str, a: float, b: float) -> float:
    """Apply ``operator`` (one of + - * /) to ``a`` and ``b``.

    Raises ZeroDivisionError when dividing by zero and ValueError for an
    unknown operator.
    """
    try:
        operation = _OPERATIONS[operator.strip()]
    except KeyError:
        raise ValueError(f"Invalid operator: {operator!r}") from None
    if operation is _op.truediv and b == 0:
        raise ZeroDivisionError("Div by Zero")
    return float(operation(float(a), float(b)))