"""Fixed-place rounding used for every reported figure"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

# Wide enough for any finite float quantized to a few places (max ~1.8e308)
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def round_half_up(value: float, places: int) -> float:
    """
    Round to a fixed number of decimal places, halves away from zero.

    Works on the shortest decimal repr of the float, so 2.675 -> 2.68
    where built-in round() gives 2.67. Infinities and NaN come back unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, context=_CONTEXT))


def round_money(value: float) -> float:
    return round_half_up(value, 2)


def round_percentage(value: float) -> float:
    return round_half_up(value, 1)


def round_whole(value: float) -> int:
    """Nearest integer; non-finite values are returned as-is since int() cannot hold them"""
    rounded = round_half_up(value, 0)
    return int(rounded) if math.isfinite(rounded) else rounded
