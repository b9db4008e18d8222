"""
Run the service: ``python -m receipt_points``.
"""
import uvicorn

from receipt_points.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "receipt_points.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
