"""Shared typed models.

This module defines the immutable value types returned by the
attribute accessors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Xtime:
    """Geo-replication timestamp pair.

    Attributes:
        seconds: Seconds component, unsigned 32-bit.
        subseconds: Sub-second count, unsigned 32-bit and not normalized.
    """

    seconds: int
    subseconds: int

    def as_tuple(self) -> tuple[int, int]:
        """Return the pair as ``(seconds, subseconds)``."""
        return (self.seconds, self.subseconds)

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())
