"""Presentation formatting for money and dates.

Amounts are kept at full precision everywhere else; rounding to paise
happens here, at display time only.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

PAISE = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round an amount to two decimal places (half up)."""
    return Decimal(value).quantize(PAISE, rounding=ROUND_HALF_UP)


def group_indian(digits: str) -> str:
    """Group an integer digit string the Indian way (12,34,567)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(value: Optional[Decimal], symbol: str = "₹") -> str:
    """Format an amount as Indian rupees, e.g. ``₹1,23,456.78``.

    None renders as ``N/A``.
    """
    if value is None:
        return "N/A"
    rounded = round_money(value)
    sign = "-" if rounded < 0 else ""
    integer_part, fraction = f"{abs(rounded):.2f}".split(".")
    return f"{sign}{symbol}{group_indian(integer_part)}.{fraction}"


def format_display_date(value: Optional[date]) -> str:
    """Format a date as ``15 Jan 2024``; missing dates render empty."""
    if value is None:
        return ""
    return value.strftime("%d %b %Y")
