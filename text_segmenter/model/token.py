"""Token stream representation shared by every segmentation strategy."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class LayoutMode(str, Enum):
    """Layout policy a label is segmented for."""

    FLOW = "flow"
    VERTICAL_BOX = "vertical_box"
    HORIZONTAL_BOX = "horizontal_box"

    @classmethod
    def coerce(cls, value: "LayoutMode | str") -> "LayoutMode":
        """Return the member matching ``value`` (a member or its string value)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown layout mode {value!r}; expected one of: {choices}")


@dataclass(frozen=True, slots=True)
class Token:
    """A renderable fragment of label text awaiting placement by the layouter."""

    content: str
    margin: Tuple[float, float] = (0.0, 0.0)
    break_after: bool = False

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-friendly mapping of the token."""
        return {
            "content": self.content,
            "margin": list(self.margin),
            "breakAfter": self.break_after,
        }


TokenSequence = Tuple[Token, ...]
