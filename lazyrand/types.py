"""Shared types for the generator and the shared instance."""

from __future__ import annotations

import enum


class ProvenanceTag(enum.Enum):
    """How the active generator's seed was established."""

    UNINITIALIZED = "uninitialized"
    AUTO_SEEDED = "auto_seeded"
    USER_SEEDED = "user_seeded"


class InvalidRangeError(ValueError):
    """Raised for an integer range with ``max < min`` or wider than 2**64."""

    def __init__(self, lo: int, hi: int) -> None:
        super().__init__(f"invalid range [{lo}, {hi}]")
        self.lo = lo
        self.hi = hi
