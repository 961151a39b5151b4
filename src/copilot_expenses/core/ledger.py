"""
CSV ledger access for Copilot Money transaction exports.

Reads the export once and coerces every row into a typed Transaction.
"""

import csv
import logging
from pathlib import Path
from typing import List, Optional

from copilot_expenses.core.exceptions import ConfigurationError, LedgerNotFoundError
from copilot_expenses.models.transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionLedger:
    """
    Read-only view of a Copilot Money CSV export.

    The header row must name the transaction fields exactly, including
    "parent category" and "account mask".
    """

    def __init__(self, csv_path: Path):
        """
        Args:
            csv_path: Path to the exported transactions CSV
        """
        self.csv_path = Path(csv_path)
        self._transactions: Optional[List[Transaction]] = None

    def is_available(self) -> bool:
        """Check if the CSV export exists."""
        return self.csv_path.is_file()

    def load(self) -> List[Transaction]:
        """
        Parse every non-blank row of the export.

        Returns:
            Transactions in file order

        Raises:
            LedgerNotFoundError: If the file does not exist
            ConfigurationError: If the file cannot be read
        """
        if self._transactions is not None:
            return self._transactions

        if not self.is_available():
            raise LedgerNotFoundError(f"Transaction CSV not found: {self.csv_path}")

        try:
            with self.csv_path.open(newline="", encoding="utf-8-sig") as f:
                reader = csv.DictReader(f)
                transactions = [
                    Transaction.model_validate({k: v for k, v in row.items() if k is not None})
                    for row in reader
                    if not _is_blank(row)
                ]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise ConfigurationError(f"Cannot read transaction CSV {self.csv_path}: {e}") from e

        logger.info("Loaded %d transactions from %s", len(transactions), self.csv_path)
        self._transactions = transactions
        return transactions


def _is_blank(row: dict) -> bool:
    """True for rows made only of empty cells, e.g. ",,,,"."""
    return not any(isinstance(cell, str) and cell.strip() for cell in row.values())
