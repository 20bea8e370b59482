"""Clock abstraction for audit timestamps.

WallClock: real wall-clock time
SimClock: deterministic stepped time (tests)
MonotonicClock: wraps another clock so successive reads strictly increase

Domain code never calls datetime.now() directly; it asks a clock.
When no clock is passed, the process default clock is used; bootstrap
installs it via ``set_default_clock``.
"""

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Protocol

from .ids import utc_now

_TICK = timedelta(microseconds=1)


class IClock(Protocol):
    """Clock interface used by all time-dependent code."""

    def now(self) -> datetime:
        """Current time as timezone-aware UTC datetime."""
        ...


class WallClock:
    """Real wall-clock time."""

    def now(self) -> datetime:
        return utc_now()


class SimClock:
    """Simulated clock for deterministic tests.

    Time advances only when explicitly set or advanced.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._time = start or datetime(2025, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._time

    def set_time(self, t: datetime) -> None:
        """Advance time. Must be monotonically increasing."""
        if t < self._time:
            raise ValueError(
                f"SimClock cannot go backwards: {t} < {self._time}"
            )
        self._time = t

    def advance_ms(self, ms: int) -> None:
        """Advance time by milliseconds."""
        self.set_time(self._time + timedelta(milliseconds=ms))


class MonotonicClock:
    """Clock whose successive reads are strictly increasing.

    If the wrapped clock has not moved (coarse resolution) or has gone
    backwards (NTP step), the previous reading plus one microsecond is
    returned instead.
    """

    def __init__(self, source: IClock | None = None) -> None:
        self._source = source or WallClock()
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            current = self._source.now()
            if self._last is not None and current <= self._last:
                current = self._last + _TICK
            self._last = current
            return current


_default_clock: IClock = MonotonicClock(WallClock())


def get_default_clock() -> IClock:
    """Clock used when domain code is not handed one explicitly."""
    return _default_clock


def set_default_clock(clock: IClock) -> None:
    """Install the process default clock (bootstrap / tests)."""
    global _default_clock
    _default_clock = clock
