"""
Display rounding for reported averages.

Halves round away from zero (2.25 -> 2.3, -2.25 -> -2.3), the way score
averages are shown on the dashboard, rather than Python's round-half-even.
"""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 1) -> float:
    """Round to ``digits`` decimal places, halves away from zero."""
    # str() gives the shortest repr, so 2.25 stays 2.25 rather than 2.2499...
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
