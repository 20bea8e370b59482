"""Domain layer: value objects, the audit block, and the Course entity.

Every attribute type validates itself on construction, so no code path
can observe a Course in an invalid state:

- **Value objects**: NonEmptyString, PositiveInt, Date, DateRange, UUID,
  Version, Timestamp, AuditUser
- **Role registry**: process-wide set of role principals
- **Audit**: version + authorship trail, advanced only by ``touch``
- **Course**: the aggregate, created only through ``Course.create``
"""

from course_domain.domain.audit import Audit, AuditSnapshot
from course_domain.domain.course import Course, NewCourseInput, new_course
from course_domain.domain.dates import Date, DateRange
from course_domain.domain.identity import UUID
from course_domain.domain.numbers import PositiveInt, Version
from course_domain.domain.principals import AuditUser
from course_domain.domain.roles import (
    RoleRegistry,
    clear_roles,
    is_registered,
    register_roles,
    registered_roles,
)
from course_domain.domain.text import NonEmptyString
from course_domain.domain.timestamps import Timestamp

__all__ = [
    "Audit",
    "AuditSnapshot",
    "AuditUser",
    "Course",
    "Date",
    "DateRange",
    "NewCourseInput",
    "NonEmptyString",
    "PositiveInt",
    "RoleRegistry",
    "Timestamp",
    "UUID",
    "Version",
    "clear_roles",
    "is_registered",
    "new_course",
    "register_roles",
    "registered_roles",
]
