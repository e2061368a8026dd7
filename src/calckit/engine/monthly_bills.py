"""Recurring bills normalized to a monthly figure and grouped by category.

  monthly equivalent = amount × FREQUENCY_MULTIPLIERS[frequency]
  recommended income = total / 0.50

A bill without a name, or whose amount does not parse, is left out of every
total.  The list helpers return new lists and always keep at least one row.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from calckit.config.bills import FREQUENCY_MULTIPLIERS, BillCategory, BillItem
from calckit.config.inputs import parse_number
from calckit.models.results import BillsSummary, CategoryTotal

logger = logging.getLogger(__name__)

BILLS_INCOME_RATIO = 0.50


def monthly_equivalent(bill: BillItem) -> float | None:
    """Average monthly cost of ``bill``, or ``None`` if it is excluded."""
    if not bill.name:
        return None
    amount = parse_number(bill.amount, fallback=None)
    if amount is None:
        return None
    return amount * FREQUENCY_MULTIPLIERS[bill.frequency]


def summarize_bills(bills: Sequence[BillItem]) -> BillsSummary:
    category_totals = dict.fromkeys(BillCategory, 0.0)
    total = 0.0
    included = 0

    for bill in bills:
        monthly = monthly_equivalent(bill)
        if monthly is None:
            logger.debug("Skipping incomplete bill %r", bill.name)
            continue
        included += 1
        total += monthly
        category_totals[bill.category] += monthly

    by_category = [
        CategoryTotal(
            category=category,
            total=amount,
            percentage=amount / total * 100 if total > 0 else 0.0,
        )
        for category, amount in category_totals.items()
        if amount > 0
    ]

    return BillsSummary(
        total_monthly=total,
        annual_total=total * 12,
        by_category=by_category,
        recommended_income=total / BILLS_INCOME_RATIO,
        included_count=included,
    )


# ═══════════════════════════════════════════════════════════════════════════
# List editing
# ═══════════════════════════════════════════════════════════════════════════

def add_bill(bills: Sequence[BillItem]) -> list[BillItem]:
    return [*bills, BillItem()]


def _valid_index(bills: Sequence[BillItem], index: int) -> bool:
    if 0 <= index < len(bills):
        return True
    logger.debug("Ignoring bill index %s for %s rows", index, len(bills))
    return False


def remove_bill(bills: Sequence[BillItem], index: int) -> list[BillItem]:
    """Drop the bill at ``index``; the last remaining row is never removed.

    An index outside the list leaves it unchanged.
    """
    if len(bills) <= 1 or not _valid_index(bills, index):
        return list(bills)
    remaining = list(bills)
    del remaining[index]
    return remaining


def update_bill(bills: Sequence[BillItem], index: int, **changes: object) -> list[BillItem]:
    """Replace the bill at ``index`` with a validated copy carrying ``changes``.

    An index outside the list leaves it unchanged.
    """
    updated = list(bills)
    if not _valid_index(bills, index):
        return updated
    current = updated[index]
    updated[index] = BillItem.model_validate({**current.model_dump(), **changes})
    return updated


def clear_bills() -> list[BillItem]:
    return [BillItem()]
