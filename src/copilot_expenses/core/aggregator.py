"""
Spending aggregation by parent and child category.
"""

import logging
from collections import Counter
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Tuple

from copilot_expenses.core.exceptions import ConfigurationError
from copilot_expenses.models.category import CategoryTotals, ParentCategoryDetail
from copilot_expenses.models.transaction import Transaction
from copilot_expenses.utils.date_utils import DateLike, parse_calendar_date

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def parse_window(start_date: DateLike, end_date: DateLike) -> Tuple[date, date]:
    """
    Validate and parse an inclusive report window.

    Raises:
        ConfigurationError: If either bound is not a date or start > end
    """
    bounds = []
    for label, value in (("start", start_date), ("end", end_date)):
        try:
            bounds.append(parse_calendar_date(value))
        except ValueError as e:
            raise ConfigurationError(f"Invalid {label} date {value!r}: {e}") from e

    start, end = bounds
    if start > end:
        raise ConfigurationError(f"Start date {start} is after end date {end}")
    return start, end


def round_amount(value: Decimal) -> float:
    """Round half-up to cents."""
    return float(value.quantize(CENTS, rounding=ROUND_HALF_UP))


def aggregate(
    records: Iterable[Transaction],
    start_date: DateLike,
    end_date: DateLike,
    *,
    attribute_uncategorized_to_parent: bool = False,
) -> CategoryTotals:
    """
    Fold transactions into per-parent spending totals.

    A row without a parent category is reported as a top-level category of
    its own. A row with both is added to the parent's total and to the
    child's entry. Rows with no category are dropped, unless
    ``attribute_uncategorized_to_parent`` is set, in which case a row that
    still names a parent counts toward that parent's total.

    Args:
        records: Parsed ledger rows
        start_date: First day of the window (inclusive)
        end_date: Last day of the window (inclusive)
        attribute_uncategorized_to_parent: Policy for rows with a parent
            category but an empty category

    Returns:
        Mapping of parent category to its total and child breakdown,
        rounded to 2 decimal places

    Raises:
        ConfigurationError: If the window bounds are invalid
    """
    start, end = parse_window(start_date, end_date)

    totals: Dict[str, Decimal] = {}
    children: Dict[str, Dict[str, Decimal]] = {}
    skipped: Counter = Counter()
    included = 0

    for txn in records:
        if txn.excluded:
            skipped["excluded"] += 1
            continue

        if txn.date is None:
            logger.debug("Skipping %r: no usable date", txn.name)
            skipped["undated"] += 1
            continue
        if txn.date < start or txn.date > end:
            skipped["out_of_window"] += 1
            continue

        # repr keeps the value as written in the ledger (45.555, not 45.554999...)
        amount = abs(Decimal(repr(txn.amount or 0.0)))

        if txn.category and not txn.parent_category:
            parent, child = txn.category, None
        elif txn.category:
            parent, child = txn.parent_category, txn.category
        elif txn.parent_category and attribute_uncategorized_to_parent:
            parent, child = txn.parent_category, None
        else:
            logger.debug("Dropping %r: empty category", txn.name)
            skipped["uncategorized"] += 1
            continue

        totals[parent] = totals.get(parent, Decimal(0)) + amount
        breakdown = children.setdefault(parent, {})
        if child is not None:
            breakdown[child] = breakdown.get(child, Decimal(0)) + amount
        included += 1

    logger.info(
        "Aggregated %d transactions into %d parent categories for %s..%s "
        "(excluded=%d, out_of_window=%d, undated=%d, uncategorized=%d)",
        included,
        len(totals),
        start,
        end,
        skipped["excluded"],
        skipped["out_of_window"],
        skipped["undated"],
        skipped["uncategorized"],
    )

    return {
        parent: ParentCategoryDetail(
            total=round_amount(total),
            categories={
                child: round_amount(amount)
                for child, amount in children[parent].items()
            },
        )
        for parent, total in totals.items()
    }
