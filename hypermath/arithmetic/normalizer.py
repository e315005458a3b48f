"""Turns caller-supplied operands into finite floats."""

import math
import re
from numbers import Real

from hypermath.arithmetic.exceptions import InvalidInputError
from hypermath.logging.logger import Log

# "5", "5.", ".5", "-1e3"; no underscores, no "nan" or "inf" spellings.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_PREFIXED_LITERAL = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+", re.ASCII)
# Whitespace plus the byte order mark, which str.strip() keeps.
_PADDING = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def normalize(value: object) -> float:
    """Validate a raw operand and return it as a finite float.

    Numbers pass through at full precision. Strings are trimmed and must parse
    as a complete number; a partial parse such as "3.14abc" is rejected.

    Raises:
        InvalidInputError: for None, booleans, unsupported types, NaN,
            infinities and strings that are empty or not a number.
    """
    if value is None:
        raise _reject("Invalid input: received None")
    if isinstance(value, str):
        return _normalize_text(value)
    if isinstance(value, Real) and not isinstance(value, bool):
        return _normalize_number(value)
    raise _reject(f'Invalid input: unsupported type "{type(value).__name__}"')


def _normalize_number(value: Real) -> float:
    try:
        number = float(value)
    except OverflowError as exc:
        raise _reject(
            f"Invalid input: {type(value).__name__} value is outside the float range"
        ) from exc
    if not math.isfinite(number):
        raise _reject(f"Invalid input: received {number}")
    return number


def _normalize_text(value: str) -> float:
    text = _PADDING.sub("", value)
    if not text:
        raise _reject("Invalid input: empty string")

    if _DECIMAL_LITERAL.fullmatch(text):
        number = float(text)
    elif _PREFIXED_LITERAL.fullmatch(text):
        try:
            number = float(int(text, 0))
        except OverflowError:
            number = math.inf
    else:
        number = math.nan

    if not math.isfinite(number):
        raise _reject(f'Invalid input: "{value}" cannot be parsed to a valid number')
    return number


def _reject(message: str) -> InvalidInputError:
    Log.debug(f"Rejected operand: {message}")
    return InvalidInputError(message)
