"""Timestamp value object for audit instants."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from course_domain.core.clock import IClock, get_default_clock
from course_domain.core.errors import InvalidError


@dataclass(frozen=True, order=True)
class Timestamp:
    """Timezone-aware UTC instant with microsecond resolution.

    Naive datetimes are rejected; aware ones are normalised to UTC so that
    equality and ordering never depend on the input offset.
    """

    value: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise InvalidError(
                "timestamp must be a datetime",
                context={"received_type": type(self.value).__name__},
            )
        if self.value.tzinfo is None or self.value.utcoffset() is None:
            raise InvalidError(
                "timestamp must be timezone-aware",
                context={"input": self.value.isoformat()},
            )
        object.__setattr__(self, "value", self.value.astimezone(timezone.utc))

    @classmethod
    def now(cls, clock: IClock | None = None) -> Timestamp:
        return cls((clock or get_default_clock()).now())

    def to_datetime(self) -> datetime:
        return self.value

    def rfc3339(self) -> str:
        """RFC 3339 form, e.g. ``2025-10-05T22:38:09.924551Z``."""
        v = self.value
        return (
            f"{v.year:04d}-{v.month:02d}-{v.day:02d}"
            f"T{v.hour:02d}:{v.minute:02d}:{v.second:02d}.{v.microsecond:06d}Z"
        )

    def __str__(self) -> str:
        return self.rfc3339()
