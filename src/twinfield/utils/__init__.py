"""Utility functions for the Twinfield client."""

from twinfield.utils.date_parser import format_date, parse_date
from twinfield.utils.amount_parser import format_amount, parse_amount, parse_rate

__all__ = ["parse_date", "format_date", "parse_amount", "parse_rate", "format_amount"]
