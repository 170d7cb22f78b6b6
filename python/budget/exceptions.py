"""
Budget Exceptions Module

Domain errors raised by the budget tracker core.
"""


class BudgetError(Exception):
    """Base class for budget tracker errors."""


class DuplicateBudgetNameError(BudgetError, ValueError):
    """Raised when a budget name is already in use."""


class NegativeLimitError(BudgetError, ValueError):
    """Raised when a budget limit is below zero."""


class BudgetNotFoundError(BudgetError, LookupError):
    """Raised when no budget matches the requested name or keyword."""


class InvalidMonthYearError(BudgetError, ValueError):
    """Raised when a month/year pair does not describe a calendar month."""

    def __init__(self, month, year):
        self.month = month
        self.year = year
        super().__init__(f"Invalid month/year: {month}/{year}")


class InvalidLimitError(BudgetError, ValueError):
    """Raised when a budget limit is not a finite number."""


class InvalidBudgetNameError(BudgetError, ValueError):
    """Raised when a budget name is empty."""
