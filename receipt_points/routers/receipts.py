"""
Receipt API endpoints.

POST /receipts/process         — register a receipt, return its id
GET  /receipts/{id}/points     — points awarded for a registered receipt
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from receipt_points.schemas import (
    ErrorResponse,
    PointsResponse,
    ProcessResponse,
    Receipt,
)
from receipt_points.service import get_points, submit_receipt
from receipt_points.store import ReceiptStore, get_store

router = APIRouter()


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post(
    "/receipts/process",
    response_model=ProcessResponse,
    responses={400: {"model": ErrorResponse}},
)
def process_receipt(receipt: Receipt, store: ReceiptStore = Depends(get_store)):
    receipt_id = submit_receipt(receipt, store)
    return ProcessResponse(id=receipt_id)


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get(
    "/receipts/{receipt_id}/points",
    response_model=PointsResponse,
    responses={404: {"model": ErrorResponse}},
)
def points_for_receipt(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    return PointsResponse(points=get_points(receipt_id, store))
