from hypermath.arithmetic.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    NonFiniteResultError,
)
from hypermath.arithmetic.operations import add, divide, format_number, multiply, subtract

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
