"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional
import re

ZERO = Decimal("0")

# Largest magnitude accepted as input; the product of three such values
# stays inside the default decimal context
MAX_MAGNITUDE = Decimal("1e300000")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "₹123.45"
    - "-123.45"
    - "1,23,456.78" (Indian grouping) or "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is not a finite number
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols and grouping separators
    amount_str = re.sub(r"[₹$€£¥]|Rs\.?", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Amount '{amount_str}' is not a finite number")

    return -amount if is_negative else amount


def coerce_number(value: Any, limit: Optional[Decimal] = MAX_MAGNITUDE) -> Decimal:
    """Convert user or wire input to a Decimal, falling back to zero.

    Unlike parse_amount this never raises: empty, malformed and non-finite
    input all yield Decimal("0"), as does anything larger in magnitude than
    ``limit`` (None reads stored values without a bound). Floats go through
    their shortest repr so 0.1 becomes Decimal("0.1") rather than its
    binary expansion.
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        number = value if value.is_finite() else ZERO
    else:
        if isinstance(value, (int, float)):
            value = str(value)

        if not isinstance(value, str):
            return ZERO

        try:
            number = parse_amount(value)
        except ValueError:
            return ZERO

    if limit is not None and abs(number) > limit:
        return ZERO
    return number
