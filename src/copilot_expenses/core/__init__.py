"""
Core functionality for Copilot Money expense reports.
"""

from copilot_expenses.core.aggregator import aggregate, parse_window
from copilot_expenses.core.exceptions import (
    CategoryCollisionError,
    ConfigurationError,
    ExpenseReportError,
    LedgerNotFoundError,
)
from copilot_expenses.core.ledger import TransactionLedger
from copilot_expenses.core.overrides import load_overrides, merge
from copilot_expenses.core.report import (
    build_report,
    process_expenses,
    render_report,
    summarize_totals,
    write_report,
)

__all__ = [
    "TransactionLedger",
    "aggregate",
    "parse_window",
    "merge",
    "load_overrides",
    "process_expenses",
    "build_report",
    "render_report",
    "write_report",
    "summarize_totals",
    "ExpenseReportError",
    "ConfigurationError",
    "LedgerNotFoundError",
    "CategoryCollisionError",
]
