"""
Manual category overrides for expenses the ledger does not track.

For example: mortgage, property tax, etc.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import ValidationError

from copilot_expenses.core.exceptions import CategoryCollisionError, ConfigurationError
from copilot_expenses.models.category import (
    CategoryTotals,
    ParentCategoryDetail,
    category_totals_adapter,
)

logger = logging.getLogger(__name__)

OverrideMap = Mapping[str, Union[ParentCategoryDetail, Mapping[str, Any]]]


def merge(computed: CategoryTotals, overrides: OverrideMap) -> CategoryTotals:
    """
    Add manually entered categories to computed totals.

    Overrides never replace a computed category: any shared parent key is
    rejected so data-entry mistakes surface instead of masking ledger data.
    Neither input is modified.

    Args:
        computed: Totals produced by the aggregator
        overrides: Extra parent categories, as models or plain dicts

    Returns:
        New mapping holding both sets of categories

    Raises:
        CategoryCollisionError: If an override key already exists in computed
        ConfigurationError: If an override entry has the wrong shape
    """
    try:
        validated = category_totals_adapter.validate_python(dict(overrides))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid manual overrides: {e}") from e

    parent_categories = set(computed)
    collisions = [key for key in validated if key in parent_categories]
    if collisions:
        raise CategoryCollisionError(collisions)

    merged = {key: detail.model_copy(deep=True) for key, detail in computed.items()}
    for key, detail in validated.items():
        merged[key] = detail.model_copy(deep=True)

    if validated:
        logger.info("Applied %d manual overrides: %s", len(validated), ", ".join(validated))
    return merged


def load_overrides(path: Path) -> CategoryTotals:
    """
    Read an override map from a JSON file.

    The file holds one object in the same shape as the report, e.g.
    ``{"Mortgage": {"total": 1800, "categories": {}}}``.

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read overrides file {path}: {e}") from e

    try:
        return category_totals_adapter.validate_json(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid overrides file {path}: {e}") from e
