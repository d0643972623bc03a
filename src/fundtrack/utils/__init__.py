"""Utility functions for fundtrack."""

from fundtrack.utils.date_parser import parse_date, parse_datetime
from fundtrack.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_datetime", "parse_amount"]
