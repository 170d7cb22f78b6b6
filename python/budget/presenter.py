"""
Budget Presenter Module

Formats budget outcomes and listings for console display.
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Callable, Sequence

from .config import load_budget_config
from .models import Budget

logger = logging.getLogger(__name__)


class BudgetPresenter:
    """Reports budget operation outcomes to the user."""

    MONTH_NAMES = [
        "", "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ]

    def __init__(
        self,
        output: Callable[[str], None] = print,
        config_dir: Path | str | None = None,
        config: dict | None = None
    ):
        """Initialize the presenter.

        Args:
            output: Callable receiving each rendered message
            config_dir: Path to configuration directory
            config: Already loaded configuration, used instead of config_dir
        """
        self.output = output
        self.config = config if config is not None else load_budget_config(config_dir)
        display = self.config["display"]
        self.currency_format = display["currency_format"]
        self.column_padding = int(display["column_padding"])

    def _emit(self, message: str) -> None:
        self.output(message)

    def format_amount(self, amount: Decimal) -> str:
        return self.currency_format.format(amount)

    def print_budget_name_used(self) -> None:
        self._emit("This budget name is already in use. Please choose another name.")

    def print_budget_name_empty(self) -> None:
        self._emit("The budget name cannot be empty.")

    def print_budget_limit_negative(self) -> None:
        self._emit("The budget limit cannot be negative.")

    def print_budget_limit_invalid(self) -> None:
        self._emit("The budget limit must be a finite number.")

    def print_budget_does_not_exist(self) -> None:
        self._emit("This budget does not exist.")

    def print_budget_add_successful(self, budget: Budget, count: int) -> None:
        self._emit(
            f"Budget added: {budget.name} ({self.format_amount(budget.limit)})\n"
            f"You now have {count} budget(s)."
        )

    def print_budget_del_successful(self, budget: Budget, count: int) -> None:
        self._emit(
            f"Budget deleted: {budget.name}\n"
            f"You now have {count} budget(s)."
        )

    def print_budget_set_successful(self, budget: Budget, count: int) -> None:
        self._emit(
            f"Budget limit for {budget.name} is now {self.format_amount(budget.limit)}.\n"
            f"You have {count} budget(s)."
        )

    def format_list_budgets(
        self,
        budgets: Sequence[Budget],
        totals: Sequence[Decimal],
        month: int,
        year: int,
        longest_name: int
    ) -> str:
        """Format the monthly budget listing.

        Args:
            budgets: Budgets in collection order
            totals: Amount spent per budget, aligned with budgets
            month: Reported month
            year: Reported year
            longest_name: Length of the longest budget name, for alignment

        Returns:
            Formatted listing
        """
        header = f"Budgets for {self.MONTH_NAMES[month]} {year}:"
        if not budgets:
            return f"{header}\nYou have no budgets."

        width = longest_name + self.column_padding
        lines = [header]
        for index, (budget, spent) in enumerate(zip(budgets, totals), start=1):
            remaining = budget.limit - spent
            if remaining < 0:
                status = f"over by {self.format_amount(-remaining)}"
            else:
                status = f"{self.format_amount(remaining)} left"
            lines.append(
                f"{index}. {budget.name.ljust(width)}"
                f"{self.format_amount(spent)} / {self.format_amount(budget.limit)} ({status})"
            )

        month_total = sum(totals, Decimal("0"))
        lines.append("")
        lines.append(f"Total spent this month: {self.format_amount(month_total)}")
        return "\n".join(lines)

    def print_list_budgets(
        self,
        budgets: Sequence[Budget],
        totals: Sequence[Decimal],
        month: int,
        year: int,
        longest_name: int
    ) -> None:
        self._emit(self.format_list_budgets(budgets, totals, month, year, longest_name))

    def print_budget_commands(self) -> None:
        commands = self.config["help"]["commands"]
        if not commands:
            logger.warning("Budget help requested but no commands are configured")
            return

        width = max(len(c["command"]) for c in commands) + self.column_padding
        lines = ["Budget commands:"]
        for entry in commands:
            lines.append(f"  {entry['command'].ljust(width)}{entry['description']}")
        self._emit("\n".join(lines))
