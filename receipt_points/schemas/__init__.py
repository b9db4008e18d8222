from receipt_points.schemas.base import (  # noqa: F401
    MONEY_PATTERN,
    ErrorResponse,
    Item,
    PointsResponse,
    ProcessResponse,
    Receipt,
    to_cents,
)
