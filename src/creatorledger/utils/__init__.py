"""Utility functions for creatorledger."""

from creatorledger.utils.date_parser import parse_date
from creatorledger.utils.amount_parser import parse_amount, detect_currency

__all__ = ["parse_date", "parse_amount", "detect_currency"]
