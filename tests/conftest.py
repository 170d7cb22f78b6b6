"""
Pytest configuration and fixtures for budget tracker tests.
"""

from datetime import date
from decimal import Decimal
from pathlib import Path
from unittest.mock import Mock

import pytest
import yaml

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from budget import Budget, BudgetManager, BudgetPresenter, Expense

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def config_dir() -> Path:
    """Return the config directory path."""
    return PROJECT_ROOT / "python" / "budget"


@pytest.fixture
def budget_config(config_dir: Path) -> dict:
    """Load the budget configuration."""
    with open(config_dir / "budget_config.yaml") as f:
        return yaml.safe_load(f)


@pytest.fixture
def presenter() -> Mock:
    """Return a mock presenter recording every call."""
    return Mock(spec=BudgetPresenter)


@pytest.fixture
def manager(presenter: Mock) -> BudgetManager:
    """Return an empty manager wired to the mock presenter."""
    return BudgetManager(presenter=presenter)


@pytest.fixture
def sample_budgets() -> list[Budget]:
    """Return a list of sample budgets."""
    return [
        Budget(name="Food", limit=Decimal("100.00")),
        Budget(name="Transport", limit=Decimal("50.00")),
        Budget(name="Fast Food", limit=Decimal("30.00")),
    ]


@pytest.fixture
def sample_expenses() -> list[Expense]:
    """Return a list of sample expenses spanning two months."""
    return [
        Expense("Groceries", Decimal("20.00"), "Food", date(2024, 3, 5)),
        Expense("Dinner", Decimal("50.00"), "Food", date(2024, 4, 1)),
        Expense("Bus pass", Decimal("12.50"), "Transport", date(2024, 3, 1)),
        Expense("Taxi", Decimal("7.50"), "Transport", date(2024, 3, 31)),
        Expense("Burger", Decimal("8.00"), "Fast Food", date(2024, 3, 15)),
        Expense("Snack", Decimal("3.00"), "food", date(2024, 3, 10)),
        Expense("Lunch", Decimal("9.00"), "Food ", date(2024, 3, 11)),
        Expense("Feb groceries", Decimal("40.00"), "Food", date(2024, 2, 29)),
    ]
