"""
Budget Manager Module

Creates, edits, deletes, searches and reports budgets against recorded
expenses for a calendar month.
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from .commons import first_day_of_month, is_valid_month_year
from .config import load_budget_config
from .exceptions import (
    BudgetError,
    BudgetNotFoundError,
    DuplicateBudgetNameError,
    InvalidBudgetNameError,
    InvalidLimitError,
    NegativeLimitError,
)
from .expense_filter import (
    filter_expenses_by_category,
    filter_expenses_by_date,
    get_total_expenses,
)
from .models import Budget, Expense, parse_limit
from .presenter import BudgetPresenter

logger = logging.getLogger(__name__)


class BudgetManager:
    """Manages the budget list and reports spending against it."""

    def __init__(
        self,
        budgets: list[Budget] | None = None,
        presenter: BudgetPresenter | None = None,
        config_dir: Path | str | None = None
    ):
        """Initialize the manager.

        Args:
            budgets: Budget list to manage, mutated in place
            presenter: Presenter used to report outcomes
            config_dir: Path to configuration directory

        Raises:
            InvalidBudgetNameError: If a supplied budget has an empty name
            DuplicateBudgetNameError: If two supplied budgets share a name
            InvalidLimitError: If a supplied limit is not a finite number
            NegativeLimitError: If a supplied limit is below zero
        """
        budgets = budgets if budgets is not None else []
        self._validate_budgets(budgets)
        self._budgets = budgets
        self.config = load_budget_config(config_dir)
        self.presenter = presenter if presenter is not None else BudgetPresenter(config=self.config)

    @staticmethod
    def _validate_budgets(budgets: list[Budget]) -> None:
        seen = set()
        for budget in budgets:
            if not budget.name:
                raise InvalidBudgetNameError("Budget name is empty")
            if budget.name in seen:
                raise DuplicateBudgetNameError(f"Budget name already used: {budget.name}")
            seen.add(budget.name)
            parse_limit(budget.limit)

    @property
    def budgets(self) -> list[Budget]:
        return self._budgets

    def get_budgets(self) -> list[Budget]:
        return self._budgets

    def get_budget(self, name: str) -> Budget | None:
        """Get a budget by exact name.

        Args:
            name: Budget name

        Returns:
            Matching Budget or None
        """
        for budget in self._budgets:
            if budget.name == name:
                return budget
        return None

    def _check_new_budget(self, name: str, limit: Decimal | float | str) -> Decimal:
        if not name:
            raise InvalidBudgetNameError("Budget name is empty")
        if self.get_budget(name) is not None:
            raise DuplicateBudgetNameError(f"Budget name already used: {name}")
        return parse_limit(limit)

    def _report_error(self, error: BudgetError) -> None:
        logger.warning("Budget operation rejected: %s", error)
        if isinstance(error, InvalidBudgetNameError):
            self.presenter.print_budget_name_empty()
        elif isinstance(error, DuplicateBudgetNameError):
            self.presenter.print_budget_name_used()
        elif isinstance(error, NegativeLimitError):
            self.presenter.print_budget_limit_negative()
        elif isinstance(error, InvalidLimitError):
            self.presenter.print_budget_limit_invalid()
        elif isinstance(error, BudgetNotFoundError):
            self.presenter.print_budget_does_not_exist()
        else:
            raise error

    def add_budget(self, name: str, limit: Decimal | float | str) -> None:
        """Create a budget.

        Args:
            name: Name of the new budget
            limit: Monetary limit of the budget
        """
        try:
            limit = self._check_new_budget(name, limit)
        except (InvalidBudgetNameError, DuplicateBudgetNameError, InvalidLimitError, NegativeLimitError) as e:
            self._report_error(e)
            return

        budget = Budget(name=name, limit=limit)
        self._budgets.append(budget)
        logger.info("Added budget %s with limit %s", name, limit)

        self.presenter.print_budget_add_successful(budget, len(self._budgets))

    def delete_budget(self, name: str, expenses: Iterable[Expense] | None = None) -> None:
        """Delete a budget.

        Expenses filed under the budget are left untouched.

        Args:
            name: Name of the budget to delete
            expenses: Unused
        """
        budget = self.get_budget(name)
        if budget is None:
            self._report_error(BudgetNotFoundError(f"Budget not found: {name}"))
            return

        self._budgets.remove(budget)
        logger.info("Deleted budget %s", name)

        self.presenter.print_budget_del_successful(budget, len(self._budgets))

    def set_budget(self, name: str, limit: Decimal | float | str) -> None:
        """Change the limit of an existing budget.

        Args:
            name: Name of the budget to modify
            limit: New monetary limit
        """
        budget = self.get_budget(name)
        if budget is None:
            self._report_error(BudgetNotFoundError(f"Budget not found: {name}"))
            return
        try:
            limit = parse_limit(limit)
        except (InvalidLimitError, NegativeLimitError) as e:
            self._report_error(e)
            return

        budget.limit = limit
        logger.info("Set budget %s limit to %s", name, limit)

        self.presenter.print_budget_set_successful(budget, len(self._budgets))

    def find_budget(self, keyword: str) -> list[Budget]:
        """Search budget names for a keyword.

        Matching is a case-sensitive substring test. Matches are not shown
        to the user; only a miss is reported.

        Args:
            keyword: Text to look for in budget names

        Returns:
            Matching budgets in collection order
        """
        found = [b for b in self._budgets if keyword in b.name]

        if not found:
            self._report_error(BudgetNotFoundError(f"No budget name contains: {keyword}"))
        else:
            logger.debug("Found %d budget(s) matching %r", len(found), keyword)

        return found

    def calculate_totals(self, month: int, year: int, expenses: Iterable[Expense]) -> tuple[list[Decimal], int]:
        """Total the spending of each budget within a month.

        Args:
            month: Calendar month
            year: Calendar year
            expenses: Expenses to aggregate

        Returns:
            Tuple of (per-budget totals aligned with the budget list,
            length of the longest budget name)

        Raises:
            InvalidMonthYearError: If month/year is invalid
        """
        validation = self.config["validation"]
        end_date = is_valid_month_year(
            month, year,
            min_year=validation["min_year"],
            max_year=validation["max_year"]
        )
        start_date = first_day_of_month(end_date)

        expenses = list(expenses)
        totals = []
        longest_name = 0

        for budget in self._budgets:
            category = budget.name
            longest_name = max(longest_name, len(category))

            filtered = filter_expenses_by_category(expenses, category)
            filtered = filter_expenses_by_date(filtered, start_date, end_date)

            total = get_total_expenses(filtered)
            logger.debug(
                "Budget %s: %d expense(s) totalling %s between %s and %s",
                category, len(filtered), total, start_date, end_date
            )
            totals.append(total)

        return totals, longest_name

    def print_budgets(self, month: int, year: int, expenses: Iterable[Expense]) -> None:
        """Report spending against every budget for a month.

        Args:
            month: Calendar month
            year: Calendar year
            expenses: Expenses to aggregate

        Raises:
            InvalidMonthYearError: If month/year is invalid
        """
        totals, longest_name = self.calculate_totals(month, year, expenses)
        self.presenter.print_list_budgets(self._budgets, totals, month, year, longest_name)

    def budget_help(self) -> None:
        self.presenter.print_budget_commands()
