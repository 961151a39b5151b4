"""
Integration tests for TransactionLedger with the sample export.
"""

from datetime import date
from pathlib import Path

import pytest

from copilot_expenses.core.exceptions import ConfigurationError, LedgerNotFoundError
from copilot_expenses.core.ledger import TransactionLedger


@pytest.mark.integration
def test_ledger_available(sample_ledger):
    assert sample_ledger.is_available()


@pytest.mark.integration
def test_ledger_not_found():
    """Test that a missing export raises LedgerNotFoundError."""
    ledger = TransactionLedger(Path("/nonexistent/transactions.csv"))
    assert not ledger.is_available()
    with pytest.raises(LedgerNotFoundError):
        ledger.load()


@pytest.mark.integration
def test_ledger_not_found_is_configuration_error():
    with pytest.raises(ConfigurationError):
        TransactionLedger(Path("/nonexistent/transactions.csv")).load()


@pytest.mark.integration
def test_load_skips_blank_lines(sample_ledger):
    txns = sample_ledger.load()
    assert len(txns) == 12


@pytest.mark.integration
def test_load_types_fields(sample_ledger):
    txns = sample_ledger.load()

    first = txns[0]
    assert first.date == date(2024, 1, 5)
    assert first.name == "Whole Foods"
    assert first.amount == -45.555
    assert first.parent_category == ""
    assert first.account_mask == "1234"
    assert first.excluded is False

    payment = next(t for t in txns if t.name == "Credit card payment")
    assert payment.excluded is True
    assert payment.amount == 500.0

    cash = next(t for t in txns if t.name == "Cash withdrawal")
    assert cash.amount == 0.0


@pytest.mark.integration
def test_load_is_cached(sample_ledger):
    assert sample_ledger.load() is sample_ledger.load()


@pytest.mark.integration
def test_load_handles_bom_and_comma_only_rows(tmp_path):
    path = tmp_path / "export.csv"
    path.write_text(
        "\ufeffdate,name,amount,category,parent category,excluded\n"
        ",,,,,\n"
        "2024-02-01,Chipotle,-12.5,Restaurants,Food,false\n",
        encoding="utf-8",
    )
    txns = TransactionLedger(path).load()
    assert len(txns) == 1
    assert txns[0].date == date(2024, 2, 1)
    assert txns[0].parent_category == "Food"


@pytest.mark.integration
def test_load_tolerates_short_and_long_rows(tmp_path):
    path = tmp_path / "export.csv"
    path.write_text(
        "date,name,amount,category\n"
        "2024-02-01,Short row\n"
        "2024-02-02,Long row,-3,Coffee,extra,cells\n",
        encoding="utf-8",
    )
    txns = TransactionLedger(path).load()
    assert txns[0].amount == 0.0
    assert txns[0].category == ""
    assert txns[1].category == "Coffee"
