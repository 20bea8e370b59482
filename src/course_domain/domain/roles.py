"""Role registry: the process-wide set of recognised role principals.

Lifecycle: roles are registered once during bootstrap and only read
afterwards.  Writes are serialised with a lock and publish a fresh
``frozenset``; reads use whatever snapshot is current and never block.

Usage::

    register_roles("ADMIN", "SYSTEM")
    is_registered("ADMIN")   # True
    is_registered("admin")   # False, matching is exact (after trimming)
"""

from __future__ import annotations

import logging
import threading

from course_domain.core.errors import InvalidError

logger = logging.getLogger(__name__)


class RoleRegistry:
    """Thread-safe, read-mostly set of role names."""

    def __init__(self) -> None:
        self._roles: frozenset[str] = frozenset()
        self._lock = threading.Lock()

    def register(self, *names: str) -> frozenset[str]:
        """Add role names. Re-registering an existing name is a no-op.

        Returns the names that were newly added.
        """
        normalized = [self._normalize(n) for n in names]
        with self._lock:
            added = frozenset(normalized) - self._roles
            if added:
                self._roles = self._roles | added
        if added:
            logger.info("Roles registered: %s", ", ".join(sorted(added)))
        return added

    def contains(self, name: str) -> bool:
        return name.strip() in self._roles

    def snapshot(self) -> frozenset[str]:
        return self._roles

    def clear(self) -> None:
        with self._lock:
            self._roles = frozenset()
        logger.debug("Role registry cleared")

    def __len__(self) -> int:
        return len(self._roles)

    @staticmethod
    def _normalize(name: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise InvalidError(
                "role name cannot be blank",
                context={"input_value": name},
            )
        return name.strip()


_registry = RoleRegistry()


def get_role_registry() -> RoleRegistry:
    return _registry


def register_roles(*names: str) -> frozenset[str]:
    """Register role names in the process-wide registry."""
    return _registry.register(*names)


def is_registered(name: str) -> bool:
    return _registry.contains(name)


def registered_roles() -> frozenset[str]:
    return _registry.snapshot()


def clear_roles() -> None:
    """Empty the process-wide registry (tests, re-bootstrap)."""
    _registry.clear()
