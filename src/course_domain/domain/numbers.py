"""Integer value objects: PositiveInt and the audit Version counter."""

from __future__ import annotations

from dataclasses import dataclass

from course_domain.core.errors import InvalidError


def _require_int(value: object, type_name: str) -> int:
    # bool is an int subclass; True/False are never meaningful counts.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidError(
            f"{type_name} must be an integer",
            context={"received_type": type(value).__name__},
        )
    return value


@dataclass(frozen=True, order=True)
class PositiveInt:
    """Integer strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if _require_int(self.value, "PositiveInt") <= 0:
            raise InvalidError(
                "value must be a positive integer",
                context={"input_value": self.value},
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Version:
    """Entity version number used by the audit block.

    Zero is the "never persisted" value; audited entities start at
    ``Version.initial()`` (1) and move forward one step per touch.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if _require_int(self.value, "Version") < 0:
            raise InvalidError(
                "version cannot be negative",
                context={"input_value": self.value},
            )

    @classmethod
    def initial(cls) -> Version:
        return cls(1)

    def increment(self) -> Version:
        return Version(self.value + 1)

    def previous(self) -> Version:
        """Preceding version, never below zero."""
        if self.value <= 1:
            return Version(0)
        return Version(self.value - 1)

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
