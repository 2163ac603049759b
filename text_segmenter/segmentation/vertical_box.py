"""Vertical box layout: every explicit line becomes one token."""
from __future__ import annotations

from typing import Optional

from text_segmenter.classifier.unicode_classifier import UnicodeClassifier
from text_segmenter.model.token import TokenSequence
from text_segmenter.segmentation.base import make_token, split_lines
from text_segmenter.utils.logger import get_logger

LOGGER = get_logger(__name__)


class VerticalBoxSegmenter:
    """Segment text into whole lines stacked by the vertical layouter.

    Lines keep their inner whitespace. Stacking is structural, so no token
    carries a break hint. Distributing lines evenly inside the box needs
    nested line containers and is not handled here.
    """

    def segment(
        self,
        text: str,
        classifier: UnicodeClassifier,
        spacing: float,
        max_width: Optional[float] = None,
    ) -> TokenSequence:
        tokens = tuple(make_token(line, spacing) for line in split_lines(text))
        LOGGER.debug("Vertical box segmentation produced %d tokens", len(tokens))
        return tokens
