"""
Receipt Points — FastAPI application entry‑point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from receipt_points.config import settings
from receipt_points.errors import receipt_not_found_handler, validation_exception_handler
from receipt_points.store import ReceiptNotFound, ReceiptStore, get_store

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s %s starting (%s)", settings.APP_NAME, settings.VERSION, settings.ENVIRONMENT)
    yield
    logger.info("Shutting down, %d receipts discarded", len(get_store()))


app = FastAPI(
    title=settings.APP_NAME,
    description="Receipt submission → id → reward points",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ReceiptNotFound, receipt_not_found_handler)


@app.get("/")
async def root():
    return {"service": settings.APP_NAME, "version": settings.VERSION, "status": "running"}


@app.get("/health")
def health_check(store: ReceiptStore = Depends(get_store)):
    return {"status": "healthy", "receipts": len(store)}


# ── Register API router ──────────────────────────────────────────────────
from receipt_points.routers.receipts import router as receipts_router  # noqa: E402

app.include_router(receipts_router, tags=["Receipts"])
