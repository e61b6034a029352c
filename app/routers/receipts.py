"""
Receipt points API endpoints.

POST /receipts/process        — validate + score a receipt, return its id
GET  /receipts/{id}/points    — points awarded to a processed receipt
"""
from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Request

from app.config import settings
from app.errors import ReceiptDecodeError, ReceiptNotFoundError, ReceiptValidationError
from app.schemas import PointsResponse, ProcessResponse
from app.store import ReceiptStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_RECEIPT = "The receipt is invalid."
RECEIPT_TOO_LARGE = "The receipt is too large."
RECEIPT_NOT_FOUND = "No receipt found for that ID."


async def _read_body(request: Request, limit: int) -> bytes:
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise HTTPException(status_code=413, detail=RECEIPT_TOO_LARGE)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise HTTPException(status_code=413, detail=RECEIPT_TOO_LARGE)
    return bytes(body)


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post("/receipts/process", response_model=ProcessResponse)
async def process_receipt(request: Request, store: ReceiptStore = Depends(get_store)):
    body = await _read_body(request, settings.MAX_RECEIPT_BYTES)
    logger.info("Process receipt: len=%d", len(body))

    try:
        receipt_id = store.process(body)
    except ReceiptDecodeError as e:
        logger.warning("Rejected undecodable receipt: %s", e.__cause__ or e)
        raise HTTPException(status_code=400, detail=INVALID_RECEIPT)
    except ReceiptValidationError as e:
        logger.warning("Rejected invalid receipt: %s", e)
        raise HTTPException(status_code=400, detail=INVALID_RECEIPT)

    return ProcessResponse(id=str(receipt_id))


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
def get_receipt_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    try:
        rid = uuid.UUID(receipt_id)
    except ValueError:
        logger.warning("Malformed receipt id: %s", receipt_id)
        raise HTTPException(status_code=404, detail=RECEIPT_NOT_FOUND)

    try:
        points = store.get_points(rid)
    except ReceiptNotFoundError as e:
        logger.warning("%s", e)
        raise HTTPException(status_code=404, detail=RECEIPT_NOT_FOUND)

    return PointsResponse(points=points)
