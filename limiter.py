"""
Hello Service — Rate limiter (shared instance)
Imported by main.py and the routers that apply @limiter.limit().
Limits only bite while RATE_LIMIT_ENABLED=true.
"""
from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

import config


def get_client_ip(request: Request) -> str:
    """Use CF-Connecting-IP when behind Cloudflare, fall back to remote address."""
    return request.headers.get("CF-Connecting-IP") or get_remote_address(request)


def rate_limit_exempt() -> bool:
    """True while RATE_LIMIT_ENABLED is off."""
    return not config.RATE_LIMIT_ENABLED


limiter = Limiter(key_func=get_client_ip)
