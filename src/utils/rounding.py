# PURPOSE: Rounding helpers that reproduce the dashboard's number formatting exactly.
# CONTEXT: Generated figures must match previously stored outputs bit-for-bit, so
#          rounding follows half-toward-+inf for numbers and half-away-from-zero
#          for fixed-decimal strings instead of Python's banker's rounding.

import math
from decimal import Decimal, ROUND_HALF_UP


def round_half_up(x: float) -> float:
    """
    Round to the nearest integer, ties toward +infinity.

    notes:
    - round(2.5) == 2 in Python; this returns 3.0. round_half_up(-2.5) == -2.0.
    - Returned as float so it can be divided back without int/float mixing.
    """
    r = math.floor(x)
    if x - r >= 0.5:
        r += 1
    return float(r)


def round2(x: float) -> float:
    """Round to 2 decimal places via x*100 -> nearest -> /100."""
    return round_half_up(x * 100) / 100


def pct2(numerator: float, denominator: float) -> float:
    """
    Percentage rounded to 2dp, computed as round(n/d * 10000) / 100.

    notes:
    - Differs from round2(n/d*100) in the last bit for some inputs; keep this form.
    """
    return round_half_up((numerator / denominator) * 10000) / 100


def to_fixed(x: float, places: int) -> str:
    """
    Format x with a fixed number of decimals.

    parameters:
    - x: float – value to format.
    - places: int – digits after the decimal point.

    returns:
    - str – e.g. to_fixed(5.25, 1) == "5.3" (Python's format gives "5.2").

    notes:
    - Decimal(x) is the exact binary value, so ties are only real ties.
    """
    q = Decimal(x).quantize(Decimal(1).scaleb(-places), ROUND_HALF_UP)
    return f"{q:.{places}f}"
