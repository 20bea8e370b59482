"""Canonical ID and timestamp factories.

All modules import from here instead of calling ``uuid``/``datetime``
directly.

Timestamp Rule
--------------
All timestamps are ``datetime`` with ``tzinfo=timezone.utc``, never naive.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone


def new_uuid() -> uuid.UUID:
    """Generate a random (version 4) UUID.

    Draws from ``os.urandom``; an unavailable entropy source surfaces as
    ``OSError`` / ``NotImplementedError`` for the caller to translate.
    """
    return uuid.uuid4()


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)
