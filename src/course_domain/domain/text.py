"""Text value objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from course_domain.core.errors import InvalidError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NonEmptyString:
    """Text guaranteed to hold at least one non-whitespace character.

    Surrounding whitespace is trimmed on construction::

        NonEmptyString("  My Course ").value  # "My Course"
        NonEmptyString("   ")                 # raises InvalidError
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidError(
                "string value must be text",
                context={"received_type": type(self.value).__name__},
            )
        trimmed = self.value.strip()
        if not trimmed:
            logger.debug("NonEmptyString rejected blank input %r", self.value)
            raise InvalidError(
                "string cannot be empty",
                context={"input_value": self.value},
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)
