"""Flow layout: words cut at every legal line break, lines end with a hard break."""
from __future__ import annotations

import re
from typing import List, Optional

from text_segmenter.classifier.unicode_classifier import UnicodeClassifier
from text_segmenter.model.token import Token, TokenSequence
from text_segmenter.segmentation.base import make_token, split_lines
from text_segmenter.utils.logger import get_logger

LOGGER = get_logger(__name__)

# Whitespace separates words, except the no-break spaces (class GL)
WORD_SEPARATOR_PATTERN = re.compile(r'[^\S\u00a0\u2007\u202f]+')


class FlowSegmenter:
    """Segment text for flowed paragraph layout.

    Fitting tokens into the available width is left to the layouter; this
    strategy only places the break opportunities and the forced breaks.
    """

    def __init__(self, preserve_blank_lines: bool = False) -> None:
        self.preserve_blank_lines = preserve_blank_lines

    def segment(
        self,
        text: str,
        classifier: UnicodeClassifier,
        spacing: float,
        max_width: Optional[float] = None,
    ) -> TokenSequence:
        """Cut ``text`` into tokens; ``max_width`` is only reported, never fitted."""
        tokens: List[Token] = []
        lines = split_lines(text)

        for line in lines:
            line_tokens = [
                make_token(fragment, spacing)
                for word in self.split_words(line)
                for fragment in classifier.breakables(word)
            ]
            if line_tokens:
                line_tokens[-1] = make_token(line_tokens[-1].content, spacing, break_after=True)
            elif self.preserve_blank_lines:
                line_tokens.append(make_token("", spacing, break_after=True))
            tokens.extend(line_tokens)

        LOGGER.debug(
            "Flow segmentation produced %d tokens from %d lines (available width %s)",
            len(tokens),
            len(lines),
            max_width,
        )
        return tuple(tokens)

    @staticmethod
    def split_words(line: str) -> List[str]:
        """Split a line on breaking whitespace, dropping the whitespace."""
        return [word for word in WORD_SEPARATOR_PATTERN.split(line) if word]
