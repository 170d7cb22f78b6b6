"""
Budget Commons Module

Calendar helpers for scoping expenses to a month.
"""

import calendar
from datetime import date

from .exceptions import InvalidMonthYearError


def is_valid_month_year(
    month: int,
    year: int,
    min_year: int = 1,
    max_year: int = 9999
) -> date:
    """Validate a month/year pair.

    Args:
        month: Calendar month (1-12)
        year: Calendar year
        min_year: Earliest accepted year
        max_year: Latest accepted year

    Returns:
        Last day of the month

    Raises:
        InvalidMonthYearError: If the pair does not name a calendar month
    """
    if isinstance(month, bool) or isinstance(year, bool):
        raise InvalidMonthYearError(month, year)
    if not isinstance(month, int) or not isinstance(year, int):
        raise InvalidMonthYearError(month, year)
    if not 1 <= month <= 12:
        raise InvalidMonthYearError(month, year)
    if not max(min_year, 1) <= year <= min(max_year, 9999):
        raise InvalidMonthYearError(month, year)

    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, last_day)


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


def month_window(month: int, year: int) -> tuple[date, date]:
    """Get the inclusive [first day, last day] window of a month."""
    end_date = is_valid_month_year(month, year)
    return first_day_of_month(end_date), end_date
