"""API version identifiers."""

from __future__ import annotations

import enum
import functools


@functools.total_ordering
class Version(enum.Enum):
    """The API version sent with each request."""

    V2023_01_01 = "2023-01-01"
    V2023_06_01 = "2023-06-01"

    @classmethod
    def default(cls) -> "Version":
        """Return the version used when none is given."""
        return cls.V2023_06_01

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        members = list(Version)
        return members.index(self) < members.index(other)