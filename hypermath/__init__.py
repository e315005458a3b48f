"""HyperMath: arithmetic on numbers and numeric strings, rounded to 2 decimals."""

from hypermath.arithmetic import (
    DivisionByZeroError,
    InvalidInputError,
    NonFiniteResultError,
    add,
    divide,
    format_number,
    multiply,
    subtract,
)

__all__ = [
    "DivisionByZeroError",
    "InvalidInputError",
    "NonFiniteResultError",
    "add",
    "divide",
    "format_number",
    "multiply",
    "subtract",
]
