"""
Custom exceptions for Copilot Money expense reports.
"""

from typing import Sequence


class ExpenseReportError(Exception):
    """Base exception for expense report errors."""
    pass


class ConfigurationError(ExpenseReportError):
    """Raised when report options (dates, paths, overrides) are unusable."""
    pass


class LedgerNotFoundError(ConfigurationError):
    """Raised when the transaction CSV cannot be found."""
    pass


class CategoryCollisionError(ExpenseReportError):
    """Raised when a manual override names a category the ledger already has."""

    def __init__(self, keys: Sequence[str]):
        self.keys = list(keys)
        self.key = self.keys[0]
        names = ", ".join(repr(k) for k in self.keys)
        super().__init__(f"Manual override collides with ledger category: {names}")
