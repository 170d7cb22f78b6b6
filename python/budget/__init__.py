"""
Budget Management Module

Handles budget creation and editing, and monthly spending reports against
recorded expenses.
"""

from .models import Budget, Expense
from .exceptions import (
    BudgetError,
    DuplicateBudgetNameError,
    NegativeLimitError,
    BudgetNotFoundError,
    InvalidMonthYearError,
    InvalidLimitError,
    InvalidBudgetNameError,
)
from .commons import is_valid_month_year, month_window
from .expense_filter import (
    filter_expenses_by_category,
    filter_expenses_by_date,
    get_total_expenses,
)
from .presenter import BudgetPresenter
from .manager import BudgetManager

__all__ = [
    # Models
    "Budget",
    "Expense",
    # Errors
    "BudgetError",
    "DuplicateBudgetNameError",
    "NegativeLimitError",
    "BudgetNotFoundError",
    "InvalidMonthYearError",
    "InvalidLimitError",
    "InvalidBudgetNameError",
    # Calendar
    "is_valid_month_year",
    "month_window",
    # Expense Filtering
    "filter_expenses_by_category",
    "filter_expenses_by_date",
    "get_total_expenses",
    # Reporting
    "BudgetPresenter",
    "BudgetManager",
]
