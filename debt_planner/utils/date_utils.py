"""Date manipulation utilities"""

from calendar import monthrange
from datetime import date
from typing import Tuple


def add_months(from_date: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month's length"""
    index = from_date.month - 1 + months
    year = from_date.year + index // 12
    month = index % 12 + 1
    day = min(from_date.day, monthrange(year, month)[1])
    return date(year, month, day)


def split_months(months: int) -> Tuple[int, int]:
    """Split a month count into (years, months)"""
    return months // 12, months % 12


def month_label(from_date: date, offset: int) -> str:
    """Calendar label like 'March 2027' for the month offset from from_date"""
    return add_months(from_date, offset).strftime("%B %Y")
