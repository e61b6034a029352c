"""
In-memory receipt store.

Holds one ``ScoredReceipt`` per generated id for the lifetime of the process.
The mapping is the only shared mutable state and is guarded by a single lock.
"""
from __future__ import annotations

import logging
import threading
import uuid

from fastapi import Request
from pydantic import ValidationError

from app.errors import ReceiptDecodeError, ReceiptNotFoundError
from app.pipeline import score_receipt
from app.schemas import Receipt, ScoredReceipt

logger = logging.getLogger(__name__)


class ReceiptStore:
    def __init__(self) -> None:
        self._receipts: dict[uuid.UUID, ScoredReceipt] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def process(self, payload: bytes | str) -> uuid.UUID:
        """Decode, validate and score a receipt, then store it under a new id.

        Raises ``ReceiptDecodeError`` or ``ReceiptValidationError``; the store
        is left untouched on either.
        """
        try:
            receipt = Receipt.model_validate_json(payload)
        except ValidationError as e:
            raise ReceiptDecodeError(f"payload is not a receipt: {e.error_count()} error(s)") from e

        points = score_receipt(receipt)

        with self._lock:
            receipt_id = uuid.uuid4()
            while receipt_id in self._receipts:
                receipt_id = uuid.uuid4()
            self._receipts[receipt_id] = ScoredReceipt(id=receipt_id, receipt=receipt, points=points)

        logger.info("Stored receipt %s (%d points)", receipt_id, points)
        return receipt_id

    def get(self, receipt_id: uuid.UUID) -> ScoredReceipt:
        with self._lock:
            scored = self._receipts.get(receipt_id)
        if scored is None:
            raise ReceiptNotFoundError(f"no receipt found for id {receipt_id}")
        return scored

    def get_points(self, receipt_id: uuid.UUID) -> int:
        """Return the points stored for ``receipt_id``."""
        return self.get(receipt_id).points


def get_store(request: Request) -> ReceiptStore:
    """Receipt store dependency"""
    return request.app.state.store
