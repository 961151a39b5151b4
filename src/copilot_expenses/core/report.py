"""
End-to-end expense report: ledger -> totals -> overrides -> JSON.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from copilot_expenses.core.aggregator import aggregate, parse_window
from copilot_expenses.core.exceptions import ExpenseReportError
from copilot_expenses.core.ledger import TransactionLedger
from copilot_expenses.core.overrides import OverrideMap, merge
from copilot_expenses.models.category import CategoryTotals
from copilot_expenses.models.options import ProcessExpensesOptions

logger = logging.getLogger(__name__)


def process_expenses(options: ProcessExpensesOptions) -> CategoryTotals:
    """
    Load the ledger named in ``options`` and aggregate it over its window.

    The window is checked before the file is touched.
    """
    parse_window(options.start_date, options.end_date)
    transactions = TransactionLedger(options.csv_file_path).load()
    return aggregate(transactions, options.start_date, options.end_date)


def build_report(
    options: ProcessExpensesOptions,
    overrides: Optional[OverrideMap] = None,
) -> CategoryTotals:
    """Aggregate the ledger and apply manual overrides."""
    totals = process_expenses(options)
    return merge(totals, overrides or {})


def _json_number(value: float) -> Union[int, float]:
    # 20.0 is written as 20
    return int(value) if value.is_integer() else value


def render_report(totals: CategoryTotals) -> str:
    """Serialize totals as JSON with 2-space indentation."""
    data = {
        parent: {
            "total": _json_number(detail.total),
            "categories": {
                child: _json_number(amount) for child, amount in detail.categories.items()
            },
        }
        for parent, detail in totals.items()
    }
    return json.dumps(data, indent=2)


def write_report(totals: CategoryTotals, output_path: Path) -> Path:
    """
    Write the rendered report to ``output_path``.

    Raises:
        ExpenseReportError: If the file cannot be written
    """
    output_path = Path(output_path)
    try:
        output_path.write_text(render_report(totals) + "\n", encoding="utf-8")
    except OSError as e:
        raise ExpenseReportError(f"Cannot write report to {output_path}: {e}") from e
    logger.info("Wrote expense report to %s", output_path)
    return output_path


def summarize_totals(totals: CategoryTotals) -> Dict[str, Any]:
    """
    Grand total plus parent categories ranked by spending.

    Returns:
        Dict with grand_total, category_count and a ranking list
    """
    ranking = sorted(
        ({"parent_category": name, "total": detail.total} for name, detail in totals.items()),
        key=lambda x: x["total"],
        reverse=True,
    )
    return {
        "grand_total": round(sum(detail.total for detail in totals.values()), 2),
        "category_count": len(totals),
        "ranking": ranking,
    }
