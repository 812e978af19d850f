"""Timestamp helpers for query windows."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(timezone.utc)


def to_iso_ms(dt: datetime) -> str:
    """Format ``dt`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Naive datetimes are treated as UTC. Sub-millisecond precision is
    truncated.
    """

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def parse_iso(ts: str) -> datetime:
    """Parse an ISO-8601 string, accepting a trailing ``Z``."""

    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


def trailing_window(hours: int = 24, now: datetime | None = None) -> tuple[str, str]:
    """Return ``(since, till)`` covering the last ``hours`` up to ``now``.

    ``now`` is truncated to whole milliseconds first so both bounds are
    exactly ``hours`` apart once serialized.
    """

    end = now or utc_now()
    end = end.replace(microsecond=(end.microsecond // 1000) * 1000)
    start = end - timedelta(hours=hours)
    return to_iso_ms(start), to_iso_ms(end)


__all__ = ["utc_now", "to_iso_ms", "parse_iso", "trailing_window"]
