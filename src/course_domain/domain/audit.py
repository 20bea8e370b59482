"""Audit block: versioning and authorship metadata composed into entities.

``Audit.create`` stamps a new entity; ``touch`` is the only mutator and
every entity behavior method must call it exactly once.

    audit = Audit.create(creator)      # version 1
    audit.touch(editor)                # version 2, updated_by = editor

The instant comes from an injected ``IClock`` (default: the process
clock, a strictly increasing ``MonotonicClock`` after bootstrap).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from course_domain.core.clock import IClock, get_default_clock

from .numbers import Version
from .principals import AuditUser
from .timestamps import Timestamp


@dataclass(frozen=True)
class AuditSnapshot:
    """Immutable copy of an Audit block at one point in time."""

    version: Version
    created_by: AuditUser
    created_at: Timestamp
    updated_by: AuditUser
    updated_at: Timestamp


class Audit:
    """Mutable audit trail owned by exactly one entity.

    Construct via :meth:`create`; the raw ``__init__`` is internal.
    """

    __slots__ = (
        "_version",
        "_created_by",
        "_created_at",
        "_updated_by",
        "_updated_at",
        "_clock",
    )

    def __init__(
        self,
        version: Version,
        created_by: AuditUser,
        created_at: Timestamp,
        updated_by: AuditUser,
        updated_at: Timestamp,
        clock: IClock | None = None,
    ) -> None:
        self._version = version
        self._created_by = created_by
        self._created_at = created_at
        self._updated_by = updated_by
        self._updated_at = updated_at
        self._clock = clock

    @classmethod
    def create(cls, principal: AuditUser, clock: IClock | None = None) -> Audit:
        _require_principal(principal)
        now = Timestamp.now(clock or get_default_clock())
        return cls(
            version=Version.initial(),
            created_by=principal,
            created_at=now,
            updated_by=principal,
            updated_at=now,
            clock=clock,
        )

    def touch(self, principal: AuditUser) -> None:
        """Record a modification by *principal*."""
        _require_principal(principal)
        now = Timestamp.now(self._clock or get_default_clock())
        # updated_at never moves backwards, even if the wall clock does.
        self._updated_at = max(now, self._updated_at)
        self._updated_by = principal
        self._version = self._version.increment()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def version(self) -> Version:
        return self._version

    @property
    def created_by(self) -> AuditUser:
        return self._created_by

    @property
    def created_at(self) -> Timestamp:
        return self._created_at

    @property
    def updated_by(self) -> AuditUser:
        return self._updated_by

    @property
    def updated_at(self) -> Timestamp:
        return self._updated_at

    def snapshot(self) -> AuditSnapshot:
        return AuditSnapshot(
            version=self._version,
            created_by=self._created_by,
            created_at=self._created_at,
            updated_by=self._updated_by,
            updated_at=self._updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": int(self._version),
            "created_by": str(self._created_by),
            "created_at": self._created_at.rfc3339(),
            "updated_by": str(self._updated_by),
            "updated_at": self._updated_at.rfc3339(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Audit):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Audit(version={self._version.value}, "
            f"created_by={self._created_by.value!r}, "
            f"updated_by={self._updated_by.value!r}, "
            f"updated_at={self._updated_at.rfc3339()!r})"
        )


def _require_principal(principal: object) -> None:
    if not isinstance(principal, AuditUser):
        raise TypeError(
            f"audit principal must be an AuditUser, got {type(principal).__name__}"
        )
