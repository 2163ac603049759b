"""Font and decoration settings carried by a text label."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_FONT_SIZE = 24
DEFAULT_FONT_NAME = ""
DEFAULT_LINE_HEIGHT = 1.0
DEFAULT_TEXT_ALIGN = "left"

Color = Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class FontSpec:
    """Font selection; only the size participates in segmentation."""

    size: int | float = DEFAULT_FONT_SIZE
    name: str = DEFAULT_FONT_NAME


@dataclass(slots=True)
class TextEdge:
    """Outline ("edge") parameters for outlined glyphs."""

    color: Optional[Color] = None
    width: Optional[int] = None
    level: Optional[int] = None


@dataclass(slots=True)
class TextShadow:
    """Drop shadow parameters."""

    edge: Optional[bool] = None
    color: Optional[Color] = None
    x: Optional[int] = None
    y: Optional[int] = None
