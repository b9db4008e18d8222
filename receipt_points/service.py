"""
Receipt operations used by the HTTP layer.

submit_receipt  — register a validated receipt, return its id
get_points      — score a registered receipt
"""
from __future__ import annotations

import logging

from receipt_points.schemas import Receipt
from receipt_points.scoring import score_receipt
from receipt_points.store import ReceiptStore

logger = logging.getLogger(__name__)


def submit_receipt(receipt: Receipt, store: ReceiptStore) -> str:
    """Register *receipt* and return its new id."""
    logger.info(
        "Submit: retailer=%s  items=%d  total=%s",
        receipt.retailer, len(receipt.items), receipt.total,
    )
    return store.register(receipt)


def get_points(receipt_id: str, store: ReceiptStore) -> int:
    """Score the receipt registered under *receipt_id*.

    Raises ``ReceiptNotFound`` for an id that was never registered.
    """
    logger.info("Fetching points for receipt: %s", receipt_id)
    receipt = store.lookup(receipt_id)
    points = score_receipt(receipt)
    logger.info("Points calculated for receipt %s: %d", receipt_id, points)
    return points
