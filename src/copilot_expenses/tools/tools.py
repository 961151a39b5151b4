"""
MCP tool definitions for Copilot Money expense reports.

Exposes the spending aggregation through the Model Context Protocol.
"""

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from copilot_expenses.core.aggregator import aggregate, parse_window
from copilot_expenses.core.ledger import TransactionLedger
from copilot_expenses.core.overrides import merge
from copilot_expenses.core.report import summarize_totals
from copilot_expenses.models.category import CategoryTotals, category_totals_adapter
from copilot_expenses.utils.date_utils import parse_period


class ExpenseReportTools:
    """Collection of MCP tools for summarizing a Copilot Money ledger."""

    def __init__(self, ledger: TransactionLedger):
        """
        Initialize tools with a ledger.

        Args:
            ledger: TransactionLedger instance
        """
        self.ledger = ledger

    def _resolve_window(
        self,
        period: Optional[str],
        start_date: Optional[str],
        end_date: Optional[str],
    ) -> Tuple[date, date]:
        # Period shorthand wins over explicit dates
        if period:
            return parse_period(period)
        if not start_date or not end_date:
            raise ValueError("Provide either 'period' or both 'start_date' and 'end_date'")
        return parse_window(start_date, end_date)

    def _totals(self, start: date, end: date) -> CategoryTotals:
        return aggregate(self.ledger.load(), start, end)

    def get_expense_summary(
        self,
        period: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Get spending by parent and child category for a date window.

        Args:
            period: Period shorthand (this_month, last_30_days, ytd, etc.)
            start_date: First day of the window (YYYY-MM-DD, inclusive)
            end_date: Last day of the window (YYYY-MM-DD, inclusive)
            overrides: Extra parent categories not tracked in the ledger

        Returns:
            Dict with the window, grand total and per-category totals
        """
        start, end = self._resolve_window(period, start_date, end_date)
        totals = merge(self._totals(start, end), overrides or {})
        summary = summarize_totals(totals)

        return {
            "period": {"start_date": start.isoformat(), "end_date": end.isoformat()},
            "grand_total": summary["grand_total"],
            "category_count": summary["category_count"],
            "categories": category_totals_adapter.dump_python(totals, mode="json"),
        }

    def get_parent_category(
        self,
        parent_category: str,
        period: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Get the child breakdown of one parent category.

        Args:
            parent_category: Parent category name (case-sensitive)
            period: Period shorthand (this_month, last_30_days, ytd, etc.)
            start_date: First day of the window (YYYY-MM-DD, inclusive)
            end_date: Last day of the window (YYYY-MM-DD, inclusive)

        Returns:
            Dict with the parent total and children sorted by amount

        Raises:
            ValueError: If the parent category has no spending in the window
        """
        start, end = self._resolve_window(period, start_date, end_date)
        totals = self._totals(start, end)

        detail = totals.get(parent_category)
        if detail is None:
            raise ValueError(f"Parent category not found: {parent_category}")

        children = sorted(detail.categories.items(), key=lambda x: x[1], reverse=True)
        return {
            "parent_category": parent_category,
            "period": {"start_date": start.isoformat(), "end_date": end.isoformat()},
            "total": detail.total,
            "uncategorized": detail.uncategorized,
            "categories": [{"category": name, "total": amount} for name, amount in children],
        }


def create_tool_schemas() -> List[Dict[str, Any]]:
    """
    Create MCP tool schemas for all tools.

    Returns:
        List of tool schema definitions
    """
    window_properties = {
        "period": {
            "type": "string",
            "description": (
                "Period shorthand: this_month, last_month, "
                "last_7_days, last_30_days, last_90_days, ytd, "
                "this_year, last_year"
            ),
        },
        "start_date": {
            "type": "string",
            "description": "Start date (YYYY-MM-DD, inclusive)",
            "pattern": r"^\d{4}-\d{2}-\d{2}$",
        },
        "end_date": {
            "type": "string",
            "description": "End date (YYYY-MM-DD, inclusive)",
            "pattern": r"^\d{4}-\d{2}-\d{2}$",
        },
    }

    return [
        {
            "name": "get_expense_summary",
            "description": (
                "Get spending grouped by parent category and category for a "
                "date range. Excluded transactions are ignored and amounts are "
                "counted as absolute values. Optional 'overrides' add parent "
                "categories the ledger does not track (e.g. mortgage); they may "
                "not reuse an existing category name."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    **window_properties,
                    "overrides": {
                        "type": "object",
                        "description": (
                            "Map of parent category to "
                            "{total: number, categories: {name: number}}"
                        ),
                        "additionalProperties": {
                            "type": "object",
                            "properties": {
                                "total": {"type": "number"},
                                "categories": {
                                    "type": "object",
                                    "additionalProperties": {"type": "number"},
                                },
                            },
                            "required": ["total"],
                        },
                    },
                },
            },
        },
        {
            "name": "get_parent_category",
            "description": (
                "Get the total and per-category breakdown of one parent "
                "category for a date range."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "parent_category": {
                        "type": "string",
                        "description": "Parent category name (case-sensitive)",
                    },
                    **window_properties,
                },
                "required": ["parent_category"],
            },
        },
    ]
