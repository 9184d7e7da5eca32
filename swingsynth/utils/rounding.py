"""Rounding used for every reported swing metric."""

from decimal import Decimal, ROUND_HALF_UP


def round_half_away(value: float, ndigits: int = 0) -> float:
    """Round half away from zero at the given number of decimals.

    Python's round() rounds half to even; reported metrics round
    2.5 → 3 and -2.5 → -3 instead. Rounding works on the shortest
    decimal repr of the float, so 0.49999999999999994 stays below half.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def round_int(value: float) -> int:
    """Round half away from zero to an int."""
    return int(round_half_away(value))
