import pytest

import config
from limiter import limiter


@pytest.fixture
def rate_limited(monkeypatch):
    """Switch rate limiting on for one test, with fresh counters."""
    limiter.reset()
    monkeypatch.setattr(config, "RATE_LIMIT_ENABLED", True)
    yield limiter
    limiter.reset()
