"""
Transaction model for Copilot Money CSV exports.
"""

import datetime
import logging
import math
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from copilot_expenses.utils.date_utils import parse_calendar_date

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "True", "TRUE"}


class Transaction(BaseModel):
    """
    Represents one row of a Copilot Money transaction export.

    CSV cells arrive as strings; the validators below coerce them into
    typed values with a fixed fallback instead of failing the whole row.
    """

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    date: Optional[datetime.date] = None
    name: str = ""
    amount: float = 0.0  # Sign is kept here; aggregation uses the absolute value
    status: str = ""

    # Categorization
    category: str = ""
    parent_category: str = Field(default="", alias="parent category")
    excluded: bool = False

    # Passthrough fields
    tags: str = ""
    type: str = ""
    account: str = ""
    account_mask: str = Field(default="", alias="account mask")
    note: str = ""
    recurring: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> Optional[datetime.date]:
        """Parse the row date, leaving it unset when it cannot be read."""
        if v is None or v == "":
            return None
        try:
            return parse_calendar_date(v)
        except ValueError:
            logger.debug("Unparseable transaction date %r", v)
            return None

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> float:
        """Missing or non-numeric amounts count as zero."""
        if isinstance(v, bool) or v is None:
            return 0.0
        if isinstance(v, (int, float)):
            amount = float(v)
        else:
            try:
                amount = float(str(v).strip())
            except ValueError:
                logger.debug("Non-numeric amount %r treated as 0", v)
                return 0.0
        if not math.isfinite(amount):
            return 0.0
        return amount

    @field_validator("excluded", mode="before")
    @classmethod
    def coerce_excluded(cls, v: Any) -> bool:
        if isinstance(v, bool):
            return v
        return str(v).strip() in _TRUE_VALUES

    @field_validator(
        "name",
        "status",
        "category",
        "parent_category",
        "tags",
        "type",
        "account",
        "account_mask",
        "note",
        "recurring",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)
