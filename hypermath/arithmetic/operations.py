"""Precision-safe arithmetic on numbers and numeric strings.

Every operand goes through ``normalize`` and every result through
``format_result``; intermediate values keep full float precision.
"""

from collections.abc import Sequence

from hypermath.arithmetic.exceptions import DivisionByZeroError, InvalidInputError
from hypermath.arithmetic.formatter import format_result
from hypermath.arithmetic.normalizer import normalize
from hypermath.logging.logger import Log

_MIN_FOLD_OPERANDS = 2


def add(*values: object) -> float:
    """Add two or more values left to right.

    Example:
        add(0.1, 0.2) returns 0.3, add("10.5", "2.3") returns 12.8.
    """
    numbers = _normalize_all(values, "addition")
    total = numbers[0]
    for number in numbers[1:]:
        total += number
    return _finish("add", values, total)


def subtract(*values: object) -> float:
    """Subtract each following value from the first, strictly left to right.

    Example:
        subtract(10, 3, 2) returns 5, subtract(0.3, 0.1) returns 0.2.
    """
    numbers = _normalize_all(values, "subtraction")
    difference = numbers[0]
    for number in numbers[1:]:
        difference -= number
    return _finish("subtract", values, difference)


def multiply(first_value: object, second_value: object) -> float:
    """Multiply two values, e.g. multiply(0.1, 0.2) returns 0.02."""
    a = normalize(first_value)
    b = normalize(second_value)
    return _finish("multiply", (first_value, second_value), a * b)


def divide(first_value: object, second_value: object) -> float:
    """Divide the first value by the second.

    Raises:
        DivisionByZeroError: if the divisor normalizes to zero.
        InvalidInputError: if either operand is invalid.
    """
    a = normalize(first_value)
    b = normalize(second_value)
    if b == 0:
        Log.debug(f"divide({first_value!r}, {second_value!r}) rejected: zero divisor")
        raise DivisionByZeroError()
    return _finish("divide", (first_value, second_value), a / b)


def format_number(value: object) -> float:
    """Round a single value to two decimal places without arithmetic."""
    return _finish("format_number", (value,), normalize(value))


def _normalize_all(values: Sequence[object], operation: str) -> list[float]:
    if len(values) < _MIN_FOLD_OPERANDS:
        raise InvalidInputError(f"At least two values are required for {operation}")
    return [normalize(value) for value in values]


def _finish(operation: str, values: Sequence[object], raw_result: float) -> float:
    result = format_result(raw_result)
    Log.debug(f"{operation}{tuple(values)!r} = {result!r}")
    return result
