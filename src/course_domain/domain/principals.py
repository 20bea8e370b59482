"""AuditUser: the principal credited with creating or changing an entity.

A principal is either

1. an email address (anything containing ``@``), checked against RFC 5322
   address syntax by email-validator and normalised to lowercase, or
2. a bare role name that must already be in the role registry.

Blank input is always rejected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from course_domain.core.errors import InvalidPrincipalError

from .roles import get_role_registry

logger = logging.getLogger(__name__)

MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class AuditUser:
    """Validated principal identifier.

    Usage::

        AuditUser("Jane.Doe@Example.com").value  # "jane.doe@example.com"
        AuditUser("ADMIN")                       # needs register_roles("ADMIN")
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidPrincipalError(
                "audit user must be text",
                context={"received_type": type(self.value).__name__},
            )
        candidate = self.value.strip()
        if not candidate:
            raise InvalidPrincipalError(
                "audit user cannot be empty",
                context={"input_user": self.value},
            )
        if "@" in candidate:
            normalized = _validate_email(candidate)
        else:
            normalized = _validate_role(candidate)
        object.__setattr__(self, "value", normalized)

    @property
    def is_email(self) -> bool:
        return "@" in self.value

    @property
    def is_role(self) -> bool:
        return not self.is_email

    @property
    def local_part(self) -> str | None:
        if not self.is_email:
            return None
        return self.value.rpartition("@")[0]

    @property
    def domain(self) -> str | None:
        if not self.is_email:
            return None
        return self.value.rpartition("@")[2]

    def __str__(self) -> str:
        return self.value


def _validate_email(candidate: str) -> str:
    if len(candidate) > MAX_EMAIL_LENGTH:
        logger.debug("AuditUser rejected email %r: too long", candidate)
        raise InvalidPrincipalError(
            "email address exceeds maximum length",
            context={"input_user": candidate, "max_length": MAX_EMAIL_LENGTH},
        )
    try:
        result = validate_email(candidate, check_deliverability=False)
    except EmailNotValidError as exc:
        logger.debug("AuditUser rejected email %r: %s", candidate, exc)
        raise InvalidPrincipalError(
            "invalid email address",
            context={"input_user": candidate, "reason": str(exc)},
        ) from exc
    return result.normalized.lower()


def _validate_role(candidate: str) -> str:
    registry = get_role_registry()
    if len(registry) == 0:
        raise InvalidPrincipalError(
            "role registry is empty; register roles before constructing "
            "role principals",
            context={"input_user": candidate},
        )
    if not registry.contains(candidate):
        logger.debug("AuditUser rejected unregistered role %r", candidate)
        raise InvalidPrincipalError(
            "audit user must be a valid email or a registered role",
            context={"input_user": candidate},
        )
    return candidate
