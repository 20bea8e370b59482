"""Enumerations used across the course domain."""

from enum import Enum


class ErrorCode(str, Enum):
    INVALID = "invalid"  # Precondition on caller-supplied data not met
    INTERNAL = "internal"  # Infrastructure failure (entropy source, ...)
