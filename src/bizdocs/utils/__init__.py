"""Utility functions for bizdocs."""

from bizdocs.utils.date_parser import parse_date, parse_wire_date
from bizdocs.utils.amount_parser import parse_amount, coerce_number
from bizdocs.utils.formatting import round_money, format_inr, format_display_date

__all__ = [
    "parse_date",
    "parse_wire_date",
    "parse_amount",
    "coerce_number",
    "round_money",
    "format_inr",
    "format_display_date",
]
