"""Rough intrinsic size estimates for tokens when no font backend is present."""
from __future__ import annotations

from text_segmenter.classifier.unicode_classifier import EastAsianWidth, UnicodeClassifier

NARROW_WIDTH_FACTOR = 0.5  # Approximation for Latin alphabets
WIDE_CLASSES = (EastAsianWidth.WIDE, EastAsianWidth.FULL_WIDTH)


def estimate_text_width(text: str, font_size: float, classifier: UnicodeClassifier) -> float:
    """Estimate the advance of ``text``: wide characters take a full em."""
    width = 0.0
    for char in text:
        if classifier.is_combining(char):
            continue
        if classifier.east_asian_width_class(char) in WIDE_CLASSES:
            width += font_size
        else:
            width += font_size * NARROW_WIDTH_FACTOR
    return width
