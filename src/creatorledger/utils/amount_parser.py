"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Optional

CURRENCY_SYMBOLS = {
    "£": "GBP",
    "$": "USD",
    "€": "EUR",
    "¥": "JPY",
}


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "£123.45"
    - "1,234.56"
    - "-123.45" and "(123.45)" parse as negative; Money rejects them later

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount


def detect_currency(amount_str: str) -> Optional[str]:
    """Return the currency code implied by a leading symbol, if any.

    >>> detect_currency("£12.50")
    'GBP'
    """
    if not amount_str:
        return None
    for symbol, code in CURRENCY_SYMBOLS.items():
        if symbol in amount_str:
            return code
    return None
