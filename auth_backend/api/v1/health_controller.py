# Standard library imports
from datetime import datetime, timezone

# External package imports
from fastapi import APIRouter

# Local application imports
from ...core.config import get_settings


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Liveness check; does not touch the database"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": get_settings().app_version,
    }
