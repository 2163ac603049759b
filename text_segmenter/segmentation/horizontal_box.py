"""Horizontal box layout: clusters built from East Asian Width adjacency."""
from __future__ import annotations

from typing import List, Optional

from text_segmenter.classifier.unicode_classifier import UnicodeClassifier
from text_segmenter.model.token import TokenSequence
from text_segmenter.segmentation.base import make_token
from text_segmenter.utils.logger import get_logger

LOGGER = get_logger(__name__)


class HorizontalBoxSegmenter:
    """Segment text into character clusters laid out side by side.

    Runs of narrow characters stay together, every wide character stands
    alone and whitespace separates clusters without producing tokens.
    Combining marks stay with the character they modify.
    """

    def segment(
        self,
        text: str,
        classifier: UnicodeClassifier,
        spacing: float,
        max_width: Optional[float] = None,
    ) -> TokenSequence:
        clusters = self.clusters(text, classifier)
        tokens = tuple(make_token(cluster, spacing) for cluster in clusters if not cluster.isspace())
        LOGGER.debug("Horizontal box segmentation produced %d tokens from %d clusters", len(tokens), len(clusters))
        return tokens

    def clusters(self, text: str, classifier: UnicodeClassifier) -> List[str]:
        """Return every cluster, whitespace clusters included."""
        clusters: List[List[str]] = []
        previous: Optional[str] = None
        for char in text:
            if clusters and not self._starts_cluster(char, previous, classifier):
                clusters[-1].append(char)
            else:
                clusters.append([char])
            if previous is None or previous.isspace() or not classifier.is_combining(char):
                # a mark leaves the width of its base in effect
                previous = char
        return ["".join(cluster) for cluster in clusters]

    @staticmethod
    def _starts_cluster(char: str, previous: Optional[str], classifier: UnicodeClassifier) -> bool:
        if char.isspace() or previous is None or previous.isspace():
            return True
        if classifier.is_combining(char):
            return False
        return not (classifier.is_narrow(char) and classifier.is_narrow(previous))
