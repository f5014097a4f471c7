"""The top_k sampling parameter."""

from __future__ import annotations

import json
from dataclasses import dataclass

_U32_MAX = 2**32 - 1


@dataclass(frozen=True, order=True)
class TopK:
    """Only sample from the top K options for each subsequent token."""

    value: int = 50

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"top_k must be an integer, got {self.value!r}")
        if not 0 <= self.value <= _U32_MAX:
            raise ValueError(
                f"top_k must be in range [0, {_U32_MAX}], got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)

    def to_json(self) -> str:
        """Serialize as a bare JSON number."""
        return json.dumps(self.value)

    @classmethod
    def from_json(cls, text: str) -> "TopK":
        """Parse a bare JSON number."""
        data = json.loads(text)
        try:
            return cls(data)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc