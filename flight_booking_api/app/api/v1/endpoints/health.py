"""Health check endpoint."""

from typing import Dict

from fastapi import APIRouter

from flight_booking_api.app.core.config import settings

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def health_check() -> Dict[str, str]:
    """Report that the service is up, together with its version."""
    return {"status": "ok", "version": settings.api_version}
