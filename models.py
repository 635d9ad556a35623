"""
Hello Service — Pydantic models (response shapes)
"""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str     # always "ok" while the process is serving
    timestamp: str  # ISO-8601 UTC, computed per request
