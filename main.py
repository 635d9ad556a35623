"""
Hello Service
=============
Minimal HTTP service: a plain-text greeting on `/` and a liveness check on
`/api/health`.

Run with `python main.py` or the `hello-service` script.
"""

import signal
import sys

import uvicorn
from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from config import DOCS_ENABLED, HOST, LOG_LEVEL, PORT
from limiter import limiter
from routers import root, system

STARTUP_FAILURE = 3  # same code uvicorn.run uses when startup never completes


# ── App ───────────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Hello Service",
    description="""
Two fixed routes:

- `GET /` returns a plain-text greeting
- `GET /api/health` returns `{"status": "ok", "timestamp": "<ISO-8601>"}`

Every other path is a 404.
""",
    version="1.0.0",
    license_info={"name": "MIT"},
    docs_url="/docs" if DOCS_ENABLED else None,
    redoc_url="/redoc" if DOCS_ENABLED else None,
    openapi_url="/openapi.json" if DOCS_ENABLED else None,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# ── Routers ───────────────────────────────────────────────────────────────────

app.include_router(root.router)
app.include_router(system.router)


# ── Server ────────────────────────────────────────────────────────────────────

class Server(uvicorn.Server):
    """uvicorn server that announces itself once the listener is bound."""

    async def startup(self, sockets=None) -> None:
        # bind failures exit inside super().startup(), before the line is printed
        await super().startup(sockets=sockets)
        if self.started:
            print(f"Server is running at http://localhost:{self.config.port}", flush=True)


def _exit_cleanly(signum, frame) -> None:
    sys.exit(0)


def run() -> None:
    """Serve the app. Exits 0 on SIGINT/SIGTERM, non-zero if the port cannot be bound."""
    # uvicorn re-raises the shutdown signal once it has stopped serving
    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, _exit_cleanly)

    server = Server(uvicorn.Config(app, host=HOST, port=PORT, log_level=LOG_LEVEL))
    server.run()
    if not server.started:
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    run()
