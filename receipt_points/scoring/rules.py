"""
Point rules.

Each rule looks at one aspect of a receipt and returns the points it earned,
or ``None`` when it earned nothing. Rules never raise on a malformed amount;
that rule simply earns nothing.
"""
from __future__ import annotations

import logging
import re
from datetime import time

from pydantic import BaseModel

from receipt_points.schemas import Receipt, to_cents

logger = logging.getLogger(__name__)

_ALNUM_RE = re.compile(r"[A-Za-z0-9]")

AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)


class RuleResult(BaseModel):
    """Points awarded by one rule."""
    rule: str
    points: int
    reason: str


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def retailer_name_points(receipt: Receipt) -> RuleResult | None:
    """One point for every alphanumeric character in the retailer name."""
    count = len(_ALNUM_RE.findall(receipt.retailer))
    if not count:
        return None
    return RuleResult(
        rule="retailer_name",
        points=count,
        reason=f"{count} alphanumeric characters in {receipt.retailer!r}",
    )


def round_dollar_points(receipt: Receipt) -> RuleResult | None:
    """50 points if the total is a round dollar amount with no cents."""
    cents = to_cents(receipt.total)
    if cents is None:
        logger.debug("Unparseable total %r, no round dollar points", receipt.total)
        return None
    if cents % 100:
        return None
    return RuleResult(
        rule="round_dollar_total",
        points=50,
        reason=f"total {receipt.total} is a round dollar amount",
    )


def quarter_multiple_points(receipt: Receipt) -> RuleResult | None:
    """25 points if the total is a multiple of 0.25."""
    cents = to_cents(receipt.total)
    if cents is None:
        logger.debug("Unparseable total %r, no quarter multiple points", receipt.total)
        return None
    if cents % 25:
        return None
    return RuleResult(
        rule="quarter_multiple_total",
        points=25,
        reason=f"total {receipt.total} is a multiple of 0.25",
    )


def item_pair_points(receipt: Receipt) -> RuleResult | None:
    """5 points for every two items on the receipt."""
    pairs = len(receipt.items) // 2
    if not pairs:
        return None
    return RuleResult(
        rule="item_pairs",
        points=pairs * 5,
        reason=f"{pairs} pairs among {len(receipt.items)} items",
    )


def description_length_points(receipt: Receipt) -> RuleResult | None:
    """ceil(price * 0.2) for each item whose trimmed description length is a
    multiple of 3.

    Prices are handled in cents, so ``price * 0.2`` is ``cents / 500``.
    """
    points = 0
    matched: list[str] = []
    for item in receipt.items:
        description = item.short_description.strip()
        if len(description) % 3:
            continue
        cents = to_cents(item.price)
        if cents is None:
            logger.debug("Unparseable price %r for %r, skipped", item.price, description)
            continue
        earned = -(-cents // 500)
        points += earned
        matched.append(description)
        logger.debug("Added %d points for item: %s", earned, description)
    if not matched:
        return None
    return RuleResult(
        rule="description_length",
        points=points,
        reason=f"descriptions with length divisible by 3: {', '.join(matched)}",
    )


def odd_day_points(receipt: Receipt) -> RuleResult | None:
    """6 points if the day in the purchase date is odd."""
    if receipt.purchase_date.day % 2 == 0:
        return None
    return RuleResult(
        rule="odd_purchase_day",
        points=6,
        reason=f"purchase day {receipt.purchase_date.day} is odd",
    )


def afternoon_points(receipt: Receipt) -> RuleResult | None:
    """10 points if the purchase time is after 2:00pm and before 4:00pm."""
    if not AFTERNOON_START < receipt.purchase_time < AFTERNOON_END:
        return None
    return RuleResult(
        rule="afternoon_purchase",
        points=10,
        reason=f"purchased at {receipt.purchase_time:%H:%M}, between 14:00 and 16:00",
    )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

RULES = [
    retailer_name_points,
    round_dollar_points,
    quarter_multiple_points,
    item_pair_points,
    description_length_points,
    odd_day_points,
    afternoon_points,
]


def apply_rules(receipt: Receipt) -> list[RuleResult]:
    """Run every registered rule and return the ones that awarded points."""
    results: list[RuleResult] = []
    for fn in RULES:
        result = fn(receipt)
        if result is not None:
            results.append(result)
    return results
