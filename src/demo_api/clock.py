"""Clock capability injected into handlers that stamp responses.

Handlers never call ``datetime.now()`` directly; they ask the clock the
app was built with. Tests pass a ``FrozenClock`` to get deterministic
timestamps.
"""

from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current UTC time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall-clock time in UTC."""

    __slots__ = ()

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """A clock that stays put until advanced. For tests and demos."""

    __slots__ = ("_lock", "_now")

    def __init__(self, now: datetime | None = None) -> None:
        self._lock = threading.Lock()
        self._now = now or datetime(2024, 1, 1, tzinfo=UTC)

    def now(self) -> datetime:
        with self._lock:
            return self._now

    def advance(self, *, seconds: float) -> datetime:
        """Move the clock forward and return the new time."""
        if seconds < 0:
            msg = "seconds must be >= 0"
            raise ValueError(msg)
        with self._lock:
            self._now = self._now + timedelta(seconds=seconds)
            return self._now


def format_timestamp(value: datetime) -> str:
    """Render *value* as ISO-8601 UTC with milliseconds and a ``Z`` suffix.

    Naive datetimes are taken to already be UTC::

        >>> format_timestamp(datetime(2024, 1, 1, tzinfo=UTC))
        '2024-01-01T00:00:00.000Z'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
