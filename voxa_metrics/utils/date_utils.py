"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import List


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def start_of_week(day: date) -> date:
    """Sunday on or before the given date"""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    """Last calendar day of the month containing the given date"""
    return add_months(start_of_month(day), 1) - timedelta(days=1)


def add_months(day: date, months: int) -> date:
    """First day of the month shifted by whole months (negative goes back)"""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)
