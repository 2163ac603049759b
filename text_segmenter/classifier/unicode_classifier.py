"""Per-character Unicode properties used by the segmentation strategies."""
from __future__ import annotations

import threading
import unicodedata
from enum import Enum
from functools import lru_cache
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import uniseg

from text_segmenter.classifier.line_break import (
    LineBreakClass,
    build_resolution_table,
    compute_break_opportunities,
    derive_line_break_class,
    iter_breakables,
)
from text_segmenter.model.settings import DEFAULT_NARROW_CLASSES
from text_segmenter.utils.errors import UnicodeDataError
from text_segmenter.utils.logger import get_logger

LOGGER = get_logger(__name__)

OPPORTUNITY_CACHE_SIZE = 256


class EastAsianWidth(str, Enum):
    """UAX #11 East Asian Width property values."""

    NARROW = "Na"
    HALF_WIDTH = "H"
    WIDE = "W"
    FULL_WIDTH = "F"
    AMBIGUOUS = "A"
    NEUTRAL = "N"


class UnicodeClassifier:
    """Immutable lookup of line-break opportunities and character widths.

    One instance is meant to be shared by every strategy; see
    :func:`get_default_classifier`.
    """

    def __init__(self, narrow_classes: Iterable[EastAsianWidth | str] = DEFAULT_NARROW_CLASSES) -> None:
        self._narrow_classes = frozenset(EastAsianWidth(value) for value in narrow_classes)
        try:
            self.unicode_version = unicodedata.unidata_version
            self._line_break_classes = build_resolution_table()
            self.line_break_version = uniseg.unidata_version
            derive_line_break_class("a", self._line_break_classes)
        except (AttributeError, ValueError, TypeError) as exc:
            raise UnicodeDataError(f"Unable to load Unicode property tables: {exc}") from exc
        if not self._line_break_classes:
            raise UnicodeDataError("Line break class table is empty")
        self._opportunities = lru_cache(maxsize=OPPORTUNITY_CACHE_SIZE)(self._compute_opportunities)
        LOGGER.debug(
            "Unicode classifier ready (Unicode %s, line break data %s)",
            self.unicode_version,
            self.line_break_version,
        )

    @property
    def narrow_classes(self) -> Tuple[EastAsianWidth, ...]:
        return tuple(sorted(self._narrow_classes, key=lambda value: value.value))

    # ------------------------------------------------------------------
    # East Asian Width
    def east_asian_width_class(self, char: str) -> EastAsianWidth:
        """Return the UAX #11 class of a single character."""
        return EastAsianWidth(unicodedata.east_asian_width(char))

    def is_narrow(self, char: Optional[str]) -> bool:
        """True when ``char`` belongs to one of the narrow width classes."""
        if not char:
            return False
        return self.east_asian_width_class(char) in self._narrow_classes

    @staticmethod
    def is_combining(char: str) -> bool:
        """True for marks and joiners that never start a cluster of their own."""
        return unicodedata.category(char) in ("Mn", "Mc", "Me") or char == "\u200d"

    # ------------------------------------------------------------------
    # Line breaking
    def line_break_class(self, char: str) -> LineBreakClass:
        """Return the resolved UAX #14 class of a single character."""
        return derive_line_break_class(char, self._line_break_classes)

    def break_opportunities(self, text: str) -> List[bool]:
        """Return whether a break is allowed after each index of ``text``."""
        return list(self._opportunities(text))

    def is_breakable_between(self, text: str, index: int) -> bool:
        """True if a line break is permitted right after ``text[index]``."""
        if not 0 <= index < len(text):
            raise IndexError(f"index {index} out of range for text of length {len(text)}")
        return self._opportunities(text)[index]

    def breakables(self, word: str) -> Iterator[str]:
        """Yield the fragments of ``word`` cut at every break opportunity."""
        return iter_breakables(word, self._opportunities(word))

    def _compute_opportunities(self, text: str) -> Tuple[bool, ...]:
        classes = [self.line_break_class(char) for char in text]
        return tuple(compute_break_opportunities(text, classes))


_DEFAULT_CLASSIFIER: Optional[UnicodeClassifier] = None
_DEFAULT_LOCK = threading.Lock()
_CLASSIFIERS_BY_WIDTH: Dict[frozenset, UnicodeClassifier] = {}


def get_default_classifier() -> UnicodeClassifier:
    """Return the process-wide classifier, creating it on first use."""
    global _DEFAULT_CLASSIFIER
    if _DEFAULT_CLASSIFIER is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_CLASSIFIER is None:
                _DEFAULT_CLASSIFIER = UnicodeClassifier()
    return _DEFAULT_CLASSIFIER


def get_classifier(narrow_classes: Iterable[EastAsianWidth | str] = DEFAULT_NARROW_CLASSES) -> UnicodeClassifier:
    """Return a shared classifier for the given set of narrow width classes."""
    key = frozenset(EastAsianWidth(value) for value in narrow_classes)
    if key == frozenset(EastAsianWidth(value) for value in DEFAULT_NARROW_CLASSES):
        return get_default_classifier()
    with _DEFAULT_LOCK:
        classifier = _CLASSIFIERS_BY_WIDTH.get(key)
        if classifier is None:
            classifier = UnicodeClassifier(key)
            _CLASSIFIERS_BY_WIDTH[key] = classifier
    return classifier
