"""
Hello Service — Time helpers
"""
from datetime import datetime, timezone


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return now_utc().isoformat(timespec="milliseconds").replace("+00:00", "Z")
