"""
Pytest configuration and fixtures for copilot-expenses tests.
"""

from pathlib import Path

import pytest

from copilot_expenses.core.ledger import TransactionLedger


@pytest.fixture(scope="session")
def sample_ledger_path() -> Path:
    """Path to the sample Copilot Money export used in tests."""
    return Path(__file__).parent / "fixtures" / "transactions.csv"


@pytest.fixture
def sample_ledger(sample_ledger_path: Path) -> TransactionLedger:
    """Fresh ledger over the sample export."""
    return TransactionLedger(sample_ledger_path)


@pytest.fixture(scope="session")
def expected_2024_totals() -> dict:
    """Totals the sample export produces for calendar year 2024."""
    return {
        "Groceries": {"total": 75.66, "categories": {}},
        "Food": {"total": 77.25, "categories": {"Restaurants": 72.5, "Coffee": 4.75}},
        "Entertainment": {"total": 15.49, "categories": {"Streaming": 15.49}},
        "Shopping": {"total": 25.0, "categories": {}},
        "Cash": {"total": 0.0, "categories": {}},
    }
