"""
Options for a single expense report run.
"""

from pathlib import Path

from pydantic import BaseModel, Field


class ProcessExpensesOptions(BaseModel):
    """Where to read the ledger from and which dates to report on."""

    model_config = {"populate_by_name": True, "frozen": True}

    csv_file_path: Path = Field(alias="csvFilePath")
    start_date: str = Field(alias="startDate")  # Inclusive, e.g. "2024-01-01"
    end_date: str = Field(alias="endDate")  # Inclusive
