"""Custom exception hierarchy for the course domain.

Every error carries a machine-readable ``code`` and a ``context`` dict with
the offending input.  Wrapping follows normal exception chaining::

    try:
        name = NonEmptyString(raw)
    except InvalidError as exc:
        raise InvalidError("invalid course name") from exc

``str()`` of the outer error then reads ``"invalid course name: <cause>"``
while ``message`` keeps the bare prefix.
"""

from __future__ import annotations

from typing import Any

from .enums import ErrorCode


class CourseDomainError(Exception):
    """Base exception for all course domain errors."""

    code: ErrorCode = ErrorCode.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.context: dict[str, Any] = dict(context or {})
        super().__init__(message)

    def __str__(self) -> str:
        cause = self.__cause__
        if cause is None:
            return self.message
        return f"{self.message}: {cause}"


# --- Validation ---
class InvalidError(CourseDomainError):
    """A precondition on user-supplied data was not met."""

    code = ErrorCode.INVALID


class InvalidPrincipalError(InvalidError):
    """Audit principal is blank, malformed, or an unregistered role."""


# --- Infrastructure ---
class InternalError(CourseDomainError):
    """Failure outside the caller's control (e.g. entropy source)."""

    code = ErrorCode.INTERNAL


# --- Configuration ---
class ConfigError(CourseDomainError):
    """Invalid or missing configuration."""

    code = ErrorCode.INVALID
