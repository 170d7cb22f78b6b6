"""
Expense Filter Module

Filters and totals expenses for budget reporting.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable

from .models import Expense


def filter_expenses_by_category(expenses: Iterable[Expense], category: str) -> list[Expense]:
    """Keep expenses whose category equals the given one exactly."""
    return [e for e in expenses if e.category == category]


def filter_expenses_by_date(
    expenses: Iterable[Expense],
    start_date: date,
    end_date: date
) -> list[Expense]:
    """Keep expenses dated within [start_date, end_date]."""
    return [e for e in expenses if start_date <= e.date <= end_date]


def get_total_expenses(expenses: Iterable[Expense]) -> Decimal:
    return sum((e.amount for e in expenses), Decimal("0"))
