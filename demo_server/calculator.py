"""Four-function arithmetic for the ``calculate`` tool."""

import operator
from typing import Callable

from demo_server.errors import InvalidOperationError

# name -> (display symbol, implementation)
OPERATIONS: dict[str, tuple[str, Callable[[float, float], float]]] = {
    "add": ("+", operator.add),
    "subtract": ("-", operator.sub),
    "multiply": ("×", operator.mul),
    "divide": ("÷", operator.truediv),
}


def calculate(operation: str, a: float, b: float) -> float:
    """Apply ``operation`` to ``a`` and ``b``.

    Raises:
        InvalidOperationError: unknown operation, or ``divide`` with ``b == 0``
    """
    try:
        _, fn = OPERATIONS[operation]
    except KeyError:
        raise InvalidOperationError(f"Unknown operation: {operation}") from None

    if operation == "divide" and b == 0:
        raise InvalidOperationError("Division by zero is not allowed")
    return fn(a, b)


def format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe(operation: str, a: float, b: float) -> str:
    """Compute the result and render it as ``Result: a <op> b = result``."""
    result = calculate(operation, a, b)
    symbol = OPERATIONS[operation][0]
    return (
        f"Result: {format_number(a)} {symbol} {format_number(b)} "
        f"= {format_number(result)}"
    )
