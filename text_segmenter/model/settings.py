"""Configuration object for segmentation runs."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Mapping, Tuple

from text_segmenter.model.label_style import DEFAULT_FONT_SIZE, DEFAULT_LINE_HEIGHT
from text_segmenter.model.token import LayoutMode

DEFAULT_LAYOUT = LayoutMode.VERTICAL_BOX
DEFAULT_NARROW_CLASSES: Tuple[str, ...] = ("Na", "H")


@dataclass(slots=True)
class SegmentationSettings:
    """Values that drive a segmentation pass when no label is involved."""

    font_size: int | float = DEFAULT_FONT_SIZE
    line_height: int | float = DEFAULT_LINE_HEIGHT
    layout: LayoutMode = DEFAULT_LAYOUT
    preserve_blank_lines: bool = False
    strip_control_chars: bool = False
    narrow_classes: Tuple[str, ...] = field(default=DEFAULT_NARROW_CLASSES)

    def __post_init__(self) -> None:
        self.layout = LayoutMode.coerce(self.layout)
        self.narrow_classes = tuple(self.narrow_classes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "SegmentationSettings":
        """Build settings from a decoded JSON object, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown segmentation settings: {', '.join(unknown)}")
        return cls(**dict(data))  # type: ignore[arg-type]
