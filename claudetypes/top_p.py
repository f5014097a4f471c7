"""The top_p sampling parameter."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


class ValidationError(ValueError):
    """A value lies outside the range its type allows."""

    def __init__(self, type_name: str, expected: str, actual: Any) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{type_name}: {expected} Actual: {actual}")


@dataclass(frozen=True, order=True)
class TopP:
    """Nucleus sampling cut-off, in the range [0.0, 1.0]."""

    value: float = 1.0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"top_p must be a number, got {self.value!r}")
        value = float(self.value)
        object.__setattr__(self, "value", value)
        if value < 0.0 or value > 1.0:
            raise ValidationError(
                "TopP", "The top_p must be in range: [0.0, 1.0].", value
            )

    def __str__(self) -> str:
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)

    def to_json(self) -> str:
        """Serialize as a bare JSON number."""
        return json.dumps(self.value)

    @classmethod
    def from_json(cls, text: str) -> "TopP":
        """Parse a bare JSON number."""
        data = json.loads(text)
        try:
            return cls(data)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc