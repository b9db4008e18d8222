"""
In-memory receipt registry.

Receipts live for the lifetime of the process only. Sync FastAPI endpoints
run in a thread pool, so every access to the shared dict goes through one
``threading.Lock``.
"""
from __future__ import annotations

import logging
import threading
import uuid

from receipt_points.schemas import Receipt

logger = logging.getLogger(__name__)


class ReceiptNotFound(LookupError):
    """No receipt has been registered under the given id."""

    def __init__(self, receipt_id: str):
        super().__init__(f"No receipt found for id {receipt_id!r}")
        self.receipt_id = receipt_id


class ReceiptStore:
    """Maps generated ids to registered receipts."""

    def __init__(self) -> None:
        self._receipts: dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def register(self, receipt: Receipt) -> str:
        """Store *receipt* under a fresh id and return the id."""
        while True:
            receipt_id = str(uuid.uuid4())
            with self._lock:
                if receipt_id not in self._receipts:
                    self._receipts[receipt_id] = receipt
                    break
            logger.warning("Generated id %s already in use, retrying", receipt_id)
        logger.info("Stored receipt %s", receipt_id)
        return receipt_id

    def lookup(self, receipt_id: str) -> Receipt:
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFound(receipt_id)
        return receipt

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)


_store = ReceiptStore()


def get_store() -> ReceiptStore:
    """Receipt store dependency."""
    return _store
