"""Utility functions for fintrack."""

from fintrack.utils.date_parser import parse_date, get_period_range
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.currency import format_currency

__all__ = ["parse_date", "get_period_range", "parse_amount", "format_currency"]
