"""
Receipt scoring.

A receipt's points are the sum of every rule in ``rules.RULES``. Scoring is
pure: no shared state, no I/O.
"""
import logging

from receipt_points.schemas import Receipt
from receipt_points.scoring.rules import RuleResult, apply_rules

logger = logging.getLogger(__name__)


def score_breakdown(receipt: Receipt) -> list[RuleResult]:
    """Return the rules that awarded points, in rule order."""
    results = apply_rules(receipt)
    for result in results:
        logger.debug("Added %d points for %s: %s", result.points, result.rule, result.reason)
    return results


def score_receipt(receipt: Receipt) -> int:
    points = sum(result.points for result in score_breakdown(receipt))
    logger.info("Final calculated points: %d", points)
    return points
