"""
Pydantic models for Copilot Money expense reports.
"""

from copilot_expenses.models.category import (
    CategoryTotals,
    ParentCategoryDetail,
    category_totals_adapter,
)
from copilot_expenses.models.options import ProcessExpensesOptions
from copilot_expenses.models.transaction import Transaction

__all__ = [
    "Transaction",
    "ParentCategoryDetail",
    "CategoryTotals",
    "category_totals_adapter",
    "ProcessExpensesOptions",
]
