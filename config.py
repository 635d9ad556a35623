"""
Hello Service — Configuration
All settings are read from environment variables with sensible defaults.
"""
import os

# ── Server ────────────────────────────────────────────────────────────────────
DEFAULT_PORT          = 3001
PORT_MIN              = 1
PORT_MAX              = 65535


def parse_port(value: str | None) -> int:
    """Parse the PORT variable. Falls back to DEFAULT_PORT if missing, invalid or out of range."""
    if value is None:
        return DEFAULT_PORT
    try:
        port = int(value)
    except (ValueError, TypeError):
        return DEFAULT_PORT
    if not PORT_MIN <= port <= PORT_MAX:
        return DEFAULT_PORT
    return port


HOST                  = os.getenv("HOST", "0.0.0.0")
PORT                  = parse_port(os.getenv("PORT"))
LOG_LEVEL             = os.getenv("LOG_LEVEL", "info")

# ── Content ───────────────────────────────────────────────────────────────────
GREETING              = os.getenv("GREETING", "Hello from Elysia server!")

# ── API docs ──────────────────────────────────────────────────────────────────
DOCS_ENABLED          = os.getenv("DOCS_ENABLED", "false").lower() == "true"

# ── Rate limiting ─────────────────────────────────────────────────────────────
RATE_LIMIT_ENABLED    = os.getenv("RATE_LIMIT_ENABLED", "false").lower() == "true"
RATE_LIMIT            = os.getenv("RATE_LIMIT", "60/minute")  # slowapi limit string, GET / only
