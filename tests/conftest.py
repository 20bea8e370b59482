"""Shared fixtures for the course-domain test suite."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from course_domain.core.clock import SimClock, get_default_clock, set_default_clock
from course_domain.domain import AuditUser, NewCourseInput, clear_roles, register_roles

DEFAULT_ROLES = ("ADMIN", "SYSTEM")


# ---------------------------------------------------------------------------
# Process-wide state
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _seeded_roles():
    """Every test starts with exactly the default roles registered."""
    clear_roles()
    register_roles(*DEFAULT_ROLES)
    yield
    clear_roles()


@pytest.fixture(autouse=True)
def _restore_default_clock():
    """Tests that install a default clock must not leak it."""
    original = get_default_clock()
    yield
    set_default_clock(original)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """bootstrap() replaces root handlers; CliRunner closes their streams."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def sim_clock() -> SimClock:
    """Stepped clock starting 2025-06-01 00:00 UTC."""
    return SimClock(start=datetime(2025, 6, 1, tzinfo=timezone.utc))


# ---------------------------------------------------------------------------
# Principals
# ---------------------------------------------------------------------------

@pytest.fixture
def creator() -> AuditUser:
    return AuditUser("creator@example.com")


@pytest.fixture
def updater() -> AuditUser:
    return AuditUser("updater@example.com")


@pytest.fixture
def system_user() -> AuditUser:
    return AuditUser("SYSTEM")


# ---------------------------------------------------------------------------
# Course input
# ---------------------------------------------------------------------------

@pytest.fixture
def make_input(creator):
    """Factory returning a valid NewCourseInput with optional overrides."""

    def _make(**overrides) -> NewCourseInput:
        fields = {
            "name": "Go for Production",
            "description": "A course about writing production-ready services.",
            "enrollment_limit": 100,
            "enrollment_start_date": "2025-10-01",
            "enrollment_end_date": "2025-10-31",
            "created_by": creator,
        }
        fields.update(overrides)
        return NewCourseInput(**fields)

    return _make
