"""
Receipt schemas — the records the registry stores and the scoring engine reads.

All models are Pydantic v2 and frozen: a receipt cannot be changed once it
has been built from a request body.
"""
from __future__ import annotations

import re
from datetime import date, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MONEY_PATTERN = r"^[0-9]+\.[0-9]{2}$"
_MONEY_RE = re.compile(MONEY_PATTERN)
_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_TIME_RE = re.compile(r"^[0-9]{2}:[0-9]{2}$")


def to_cents(amount: str) -> Optional[int]:
    """Convert a printed amount such as ``"12.25"`` to integer cents.

    Returns ``None`` when the text is not a two-decimal amount.
    """
    if not isinstance(amount, str) or not _MONEY_RE.fullmatch(amount):
        return None
    dollars, cents = amount.split(".")
    return int(dollars) * 100 + int(cents)


# ---------------------------------------------------------------------------
# Receipt
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """A single purchased line item."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(
        ..., alias="shortDescription", min_length=1,
        description="Short product description, e.g. 'Mountain Dew 12PK'",
    )
    price: str = Field(..., pattern=MONEY_PATTERN, description="e.g. '6.49'")


class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str = Field(..., min_length=1)
    purchase_date: date = Field(..., alias="purchaseDate")
    purchase_time: time = Field(..., alias="purchaseTime", description="24-hour HH:MM")
    items: tuple[Item, ...]
    total: str = Field(..., pattern=MONEY_PATTERN, description="e.g. '35.35'")

    @field_validator("purchase_date", mode="before")
    @classmethod
    def _iso_date(cls, value):
        if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
            raise ValueError("purchaseDate must be YYYY-MM-DD")
        return value

    @field_validator("purchase_time", mode="before")
    @classmethod
    def _hours_and_minutes(cls, value):
        if not isinstance(value, str) or not _TIME_RE.fullmatch(value):
            raise ValueError("purchaseTime must be HH:MM")
        return value


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int = Field(..., ge=0)


class ErrorResponse(BaseModel):
    error: str
