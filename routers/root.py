"""
Hello Service — Root route
  GET /   plain-text greeting
"""
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from config import GREETING, RATE_LIMIT
from limiter import limiter, rate_limit_exempt

router = APIRouter(tags=["Root"])


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
@limiter.limit(RATE_LIMIT, exempt_when=rate_limit_exempt)
async def greeting(request: Request):
    return GREETING
