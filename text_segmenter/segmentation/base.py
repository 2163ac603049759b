"""Shared pieces of the segmentation strategies."""
from __future__ import annotations

from typing import List, Optional, Protocol

from text_segmenter.classifier.unicode_classifier import UnicodeClassifier
from text_segmenter.model.token import Token, TokenSequence


class SegmentationStrategy(Protocol):
    """Turns label text into a token stream for one layout mode."""

    def segment(
        self,
        text: str,
        classifier: UnicodeClassifier,
        spacing: float,
        max_width: Optional[float] = None,
    ) -> TokenSequence:
        ...


def split_lines(text: str) -> List[str]:
    """Split ``text`` into explicit lines without their terminating newline.

    A final newline closes the last line rather than opening an empty one.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def make_token(content: str, spacing: float, break_after: bool = False) -> Token:
    """Create a token carrying the uniform ``(spacing, 0)`` margin."""
    return Token(content=content, margin=(spacing, 0.0), break_after=break_after)
