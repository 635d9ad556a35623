"""
Hello Service — System routes
  GET /api/health   liveness check
"""
from fastapi import APIRouter

from clock import now_iso
from models import HealthResponse

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check():
    """
    Returns 200 OK if the server is running. Use for uptime monitoring.

    `timestamp` is the moment this handler ran, never cached. Not rate limited.
    """
    return HealthResponse(status="ok", timestamp=now_iso())
