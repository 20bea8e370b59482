"""Application bootstrap and the illustrative Course walkthrough.

``bootstrap`` must run before any role-shaped AuditUser is constructed:
it loads settings, configures logging, seeds the role registry and
installs the process default clock.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .core.clock import IClock, MonotonicClock, WallClock, set_default_clock
from .core.config import Settings, load_settings
from .domain import (
    AuditUser,
    Course,
    Date,
    DateRange,
    NewCourseInput,
    NonEmptyString,
    PositiveInt,
    register_roles,
)
from .observability.logger import setup_logging

logger = logging.getLogger(__name__)


def bootstrap(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load config, configure logging, seed roles, install the clock."""

    # 1. Load settings
    settings = load_settings(config_path=config_path, overrides=overrides)

    # 2. Set up logging
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )

    # 3. Seed role registry
    register_roles(*settings.roles)

    # 4. Install clock
    if settings.strict_timestamps:
        set_default_clock(MonotonicClock(WallClock()))
    else:
        set_default_clock(WallClock())

    logger.info(
        "course-domain bootstrapped: roles=%s strict_timestamps=%s",
        ",".join(settings.roles), settings.strict_timestamps,
    )
    return settings


def run_demo(
    creator: str = "admin@example.com",
    updater: str = "SYSTEM",
    clock: IClock | None = None,
) -> list[tuple[str, dict[str, Any]]]:
    """Create a course and walk it through every behavior method.

    Returns ``(stage, course.to_dict())`` pairs, one per step.  Requires
    ``bootstrap`` (or ``register_roles``) when *updater* is a role.
    """
    created_by = AuditUser(creator)
    updated_by = AuditUser(updater)
    stages: list[tuple[str, dict[str, Any]]] = []

    course = Course.create(
        NewCourseInput(
            name="Python Basics",
            description="Fundamentals of the Python language.",
            enrollment_limit=50,
            enrollment_start_date="2025-10-01",
            enrollment_end_date="2025-10-31",
            created_by=created_by,
        ),
        clock=clock,
    )
    stages.append(("Initial state", course.to_dict()))

    course.change_name(NonEmptyString("Python Basics: First Steps"), updated_by)
    stages.append(("After name change", course.to_dict()))

    course.update_enrollment_limit(PositiveInt(75), updated_by)
    stages.append(("After enrollment limit change", course.to_dict()))

    course.update_enrollment_period(
        DateRange(Date(2025, 11, 1), Date(2025, 11, 30)), updated_by
    )
    stages.append(("Final state", course.to_dict()))

    return stages
