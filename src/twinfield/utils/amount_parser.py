"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
from typing import Optional


def parse_amount(amount_str: Optional[str]) -> Optional[Decimal]:
    """Parse an amount from a response document into a Decimal.

    Handles:
    - "123.45"
    - "-123.45"
    - "" or whitespace (no amount)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount, or None for an empty value

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if amount_str is None or not amount_str.strip():
        return None

    amount_str = amount_str.strip()
    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return amount


def parse_rate(rate_str: Optional[str]) -> Optional[float]:
    """Parse an exchange rate. Empty values mean "no rate"."""
    if rate_str is None or not rate_str.strip():
        return None
    try:
        return float(rate_str.strip())
    except ValueError as e:
        raise ValueError(f"Could not parse rate '{rate_str}': {e}")


def format_amount(amount: Decimal) -> str:
    """Format an amount as a plain decimal, keeping every digit."""
    return f"{amount:f}"
