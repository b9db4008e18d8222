"""
Exception handlers — map validation failures and unknown ids onto the
``{"error": ...}`` bodies clients expect.
"""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from receipt_points.store import ReceiptNotFound

logger = logging.getLogger(__name__)

INVALID_RECEIPT = "The receipt is invalid."
RECEIPT_NOT_FOUND = "No receipt found for that ID"


def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid receipt on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": INVALID_RECEIPT},
    )


def receipt_not_found_handler(request: Request, exc: ReceiptNotFound):
    logger.warning("No receipt found for id: %s", exc.receipt_id)
    return JSONResponse(
        status_code=HTTP_404_NOT_FOUND,
        content={"error": RECEIPT_NOT_FOUND},
    )
