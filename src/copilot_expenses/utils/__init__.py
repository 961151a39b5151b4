"""
Utility functions for Copilot Money expense reports.
"""

from copilot_expenses.utils.date_utils import (
    get_month_range,
    parse_calendar_date,
    parse_period,
)

__all__ = [
    "parse_calendar_date",
    "parse_period",
    "get_month_range",
]
