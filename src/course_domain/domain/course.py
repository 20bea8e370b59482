"""Course aggregate: an always-valid entity built from value objects.

Raw input enters only through :meth:`Course.create`, which refines each
field into its value object in a fixed order and stops at the first
failure.  The resulting ``InvalidError`` message starts with a stable
prefix per field and chains the value-object error as ``__cause__``:

    ============================  ====================================
    Field                         Message prefix
    ============================  ====================================
    name                          ``invalid course name``
    description                   ``invalid course description``
    enrollment_limit              ``invalid enrollment limit``
    enrollment_start_date         ``invalid enrollment start date``
    enrollment_end_date           ``invalid enrollment end date``
    start/end ordering            ``invalid enrollment period``
    ============================  ====================================

Behavior methods take already-validated value objects, so once a Course
exists nothing done to it can make it invalid.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from course_domain.core.clock import IClock
from course_domain.core.errors import InvalidError, InvalidPrincipalError

from .audit import Audit
from .dates import Date, DateRange
from .identity import UUID
from .numbers import PositiveInt
from .principals import AuditUser
from .text import NonEmptyString

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class NewCourseInput:
    """Plain input record for :meth:`Course.create`."""

    name: str
    description: str
    enrollment_limit: int
    enrollment_start_date: str
    enrollment_end_date: str
    created_by: AuditUser


def _refine(field: str, prefix: str, build: Callable[[], T]) -> T:
    try:
        return build()
    except InvalidError as exc:
        logger.debug("Course input rejected: field=%s reason=%s", field, exc)
        raise InvalidError(prefix, context={"field": field}) from exc


def _require(value: Any, kind: type, argument: str) -> None:
    if not isinstance(value, kind):
        raise TypeError(
            f"{argument} must be {kind.__name__}, got {type(value).__name__}"
        )


class Course:
    """Course entity.

    Attributes are read-only; change them through the behavior methods,
    each of which advances the audit trail.  ``__init__`` is internal;
    use :meth:`create`.
    """

    __slots__ = (
        "_id",
        "_name",
        "_description",
        "_enrollment_limit",
        "_enrollment_period",
        "_audit",
    )

    def __init__(
        self,
        id: UUID,
        name: NonEmptyString,
        description: NonEmptyString,
        enrollment_limit: PositiveInt,
        enrollment_period: DateRange,
        audit: Audit,
    ) -> None:
        self._id = id
        self._name = name
        self._description = description
        self._enrollment_limit = enrollment_limit
        self._enrollment_period = enrollment_period
        self._audit = audit

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, data: NewCourseInput, clock: IClock | None = None) -> Course:
        """Validate *data* and build a new Course with a fresh id and audit.

        Raises:
            InvalidError: the first invalid field, prefixed as tabulated
                in the module docstring.
            InvalidPrincipalError: ``created_by`` is not an AuditUser.
            InternalError: the entropy source failed while generating the id.
        """
        name = _refine(
            "name", "invalid course name",
            lambda: NonEmptyString(data.name),
        )
        description = _refine(
            "description", "invalid course description",
            lambda: NonEmptyString(data.description),
        )
        enrollment_limit = _refine(
            "enrollment_limit", "invalid enrollment limit",
            lambda: PositiveInt(data.enrollment_limit),
        )
        start = _refine(
            "enrollment_start_date", "invalid enrollment start date",
            lambda: Date.parse(data.enrollment_start_date),
        )
        end = _refine(
            "enrollment_end_date", "invalid enrollment end date",
            lambda: Date.parse(data.enrollment_end_date),
        )
        enrollment_period = _refine(
            "enrollment_period", "invalid enrollment period",
            lambda: DateRange(start, end),
        )
        course_id = UUID.generate()

        if not isinstance(data.created_by, AuditUser):
            raise InvalidPrincipalError(
                "invalid course creator",
                context={"received_type": type(data.created_by).__name__},
            )

        course = cls(
            id=course_id,
            name=name,
            description=description,
            enrollment_limit=enrollment_limit,
            enrollment_period=enrollment_period,
            audit=Audit.create(data.created_by, clock),
        )
        logger.debug(
            "Course created: id=%s name=%r by=%s",
            course_id, name.value, data.created_by.value,
        )
        return course

    # ------------------------------------------------------------------
    # Behavior
    # ------------------------------------------------------------------

    def change_name(self, new_name: NonEmptyString, updater: AuditUser) -> None:
        _require(new_name, NonEmptyString, "new_name")
        _require(updater, AuditUser, "updater")
        self._name = new_name
        self._audit.touch(updater)
        self._log_change("name")

    def update_enrollment_limit(
        self, new_limit: PositiveInt, updater: AuditUser
    ) -> None:
        _require(new_limit, PositiveInt, "new_limit")
        _require(updater, AuditUser, "updater")
        self._enrollment_limit = new_limit
        self._audit.touch(updater)
        self._log_change("enrollment_limit")

    def update_enrollment_period(
        self, new_period: DateRange, updater: AuditUser
    ) -> None:
        _require(new_period, DateRange, "new_period")
        _require(updater, AuditUser, "updater")
        self._enrollment_period = new_period
        self._audit.touch(updater)
        self._log_change("enrollment_period")

    def _log_change(self, field: str) -> None:
        logger.debug(
            "Course %s changed %s: version=%d by=%s",
            self._id, field, self._audit.version.value, self._audit.updated_by.value,
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> NonEmptyString:
        return self._name

    @property
    def description(self) -> NonEmptyString:
        return self._description

    @property
    def enrollment_limit(self) -> PositiveInt:
        return self._enrollment_limit

    @property
    def enrollment_period(self) -> DateRange:
        return self._enrollment_period

    @property
    def audit(self) -> Audit:
        return self._audit

    def to_dict(self) -> dict[str, Any]:
        """Display form: primitives only, timestamps in RFC 3339."""
        return {
            "id": str(self._id),
            "name": self._name.value,
            "description": self._description.value,
            "enrollment_limit": self._enrollment_limit.value,
            "enrollment_period": self._enrollment_period.to_dict(),
            "audit": self._audit.to_dict(),
        }

    # Entities compare by identity, not by attribute values.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Course(id='{self._id}', name={self._name.value!r}, "
            f"version={self._audit.version.value})"
        )


def new_course(data: NewCourseInput, clock: IClock | None = None) -> Course:
    """Module-level alias for :meth:`Course.create`."""
    return Course.create(data, clock)
