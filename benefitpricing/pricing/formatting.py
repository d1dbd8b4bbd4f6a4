"""Currency formatting for premiums."""

import math


def format_price(amount: float, places: int = 2) -> float:
    """Truncate an amount to ``places`` decimal digits.

    Truncation never rounds up, so the employee is never charged more than the
    computed premium: ``format_price(15.1566663) == 15.15``.
    """
    scale = 10**places
    return math.floor(amount * scale) / scale
