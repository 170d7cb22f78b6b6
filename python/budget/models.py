"""
Budget Models Module

Data records shared by the budget manager, expense filters and presenter.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from .exceptions import InvalidLimitError, NegativeLimitError


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Convert a money value to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_limit(value: Decimal | float | int | str) -> Decimal:
    """Convert a budget limit to Decimal and check it.

    Args:
        value: Limit as entered

    Returns:
        Finite, non-negative Decimal

    Raises:
        InvalidLimitError: If the value is not a finite number
        NegativeLimitError: If the value is below zero
    """
    if isinstance(value, bool):
        raise InvalidLimitError(f"Budget limit is not a number: {value!r}")
    try:
        limit = to_decimal(value)
    except InvalidOperation:
        raise InvalidLimitError(f"Budget limit is not a number: {value!r}")

    if not limit.is_finite():
        raise InvalidLimitError(f"Budget limit is not finite: {value!r}")
    if limit < 0:
        raise NegativeLimitError(f"Budget limit is negative: {limit}")

    return limit


@dataclass
class Budget:
    """A named spending category with a monetary limit."""

    name: str
    limit: Decimal

    def __post_init__(self):
        self.limit = parse_limit(self.limit)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "limit": float(self.limit),
        }


@dataclass(frozen=True)
class Expense:
    """A dated, categorized expense recorded in the ledger."""

    description: str
    amount: Decimal
    category: str
    date: date

    def __post_init__(self):
        # frozen dataclass, so bypass __setattr__
        object.__setattr__(self, "amount", to_decimal(self.amount))
        if isinstance(self.date, datetime):
            object.__setattr__(self, "date", self.date.date())
        elif isinstance(self.date, str):
            object.__setattr__(self, "date", date.fromisoformat(self.date))

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "amount": float(self.amount),
            "category": self.category,
            "date": self.date.isoformat(),
        }
