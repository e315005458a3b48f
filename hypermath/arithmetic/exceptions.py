class InvalidInputError(ValueError):
    """Raised when an operand or an operation result is not a usable number."""


class NonFiniteResultError(InvalidInputError):
    """Raised when an arithmetic result is NaN or infinite."""


class DivisionByZeroError(InvalidInputError, ZeroDivisionError):
    """Raised when the normalized divisor is zero."""

    def __init__(self, message: str = "Division by zero is not allowed") -> None:
        super().__init__(message)
