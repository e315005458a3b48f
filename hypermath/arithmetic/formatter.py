import math
from decimal import ROUND_HALF_UP, Context, Decimal

from hypermath.arithmetic.exceptions import NonFiniteResultError

DECIMAL_PLACES = 2

_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)
# Enough digits to quantize the largest finite double.
_CONTEXT = Context(prec=400)


def format_result(value: float) -> float:
    """Round a result to two decimal places, half away from zero.

    Rounding works on the shortest decimal form of the float, so 1.005 becomes
    1.01 and 0.1 + 0.2 becomes 0.3. Negative zero comes back as 0.0.

    Raises:
        NonFiniteResultError: if the value is NaN or infinite.
    """
    if not math.isfinite(value):
        raise NonFiniteResultError(f"Operation resulted in non-finite number: {value}")
    rounded = Decimal(repr(value)).quantize(
        _QUANTUM, rounding=ROUND_HALF_UP, context=_CONTEXT
    )
    return float(rounded) + 0.0
