"""Exceptions raised by the segmentation engine."""
from __future__ import annotations


class SegmentationError(Exception):
    """Base class for every error raised by ``text_segmenter``."""


class InvalidLineHeightError(SegmentationError, TypeError):
    """Line height is neither a float multiplier nor an integral height."""

    def __init__(self, line_height: object) -> None:
        super().__init__(
            f"line_height must be a float multiplier or an int height, got {type(line_height).__name__}: {line_height!r}"
        )
        self.line_height = line_height


class UnicodeDataError(SegmentationError, RuntimeError):
    """Unicode property tables could not be loaded."""
