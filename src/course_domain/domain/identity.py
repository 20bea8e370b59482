"""Entity identity value object."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from course_domain.core.errors import InternalError, InvalidError
from course_domain.core.ids import new_uuid


@dataclass(frozen=True)
class UUID:
    """128-bit entity identifier.

    ``UUID.generate()`` draws a random v4 identifier and is never nil;
    ``UUID.nil()`` is the all-zero sentinel.
    """

    value: uuid.UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise InvalidError(
                "UUID value must be a uuid.UUID",
                context={"received_type": type(self.value).__name__},
            )

    @classmethod
    def generate(cls) -> UUID:
        try:
            return cls(new_uuid())
        except (OSError, NotImplementedError) as exc:
            raise InternalError(
                "failed to generate UUID",
                context={"operation": "UUID.generate"},
            ) from exc

    @classmethod
    def parse(cls, value: str) -> UUID:
        try:
            return cls(uuid.UUID(value))
        except (ValueError, TypeError, AttributeError) as exc:
            raise InvalidError(
                "failed to parse UUID string",
                context={"input": value},
            ) from exc

    @classmethod
    def nil(cls) -> UUID:
        return cls(uuid.UUID(int=0))

    @property
    def is_nil(self) -> bool:
        return self.value.int == 0

    def __str__(self) -> str:
        return str(self.value)
