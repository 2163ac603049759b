"""Select and run the segmentation strategy matching a layout mode."""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from text_segmenter.classifier.unicode_classifier import UnicodeClassifier, get_default_classifier
from text_segmenter.model.token import LayoutMode, TokenSequence
from text_segmenter.segmentation.base import SegmentationStrategy
from text_segmenter.segmentation.flow import FlowSegmenter
from text_segmenter.segmentation.horizontal_box import HorizontalBoxSegmenter
from text_segmenter.segmentation.line_spacing import compute_line_spacing
from text_segmenter.segmentation.vertical_box import VerticalBoxSegmenter
from text_segmenter.utils.logger import get_logger
from text_segmenter.utils.text_normalizer import TextNormalizer

LOGGER = get_logger(__name__)


class SegmentationDispatcher:
    """Compute the line spacing, then run exactly one strategy."""

    def __init__(
        self,
        classifier: Optional[UnicodeClassifier] = None,
        strategies: Optional[Mapping[LayoutMode, SegmentationStrategy]] = None,
        preserve_blank_lines: bool = False,
        strip_control_chars: bool = False,
    ) -> None:
        self._classifier = classifier or get_default_classifier()
        self._normalizer = TextNormalizer(strip_control_chars=strip_control_chars)
        self._strategies: Dict[LayoutMode, SegmentationStrategy] = {
            LayoutMode.FLOW: FlowSegmenter(preserve_blank_lines=preserve_blank_lines),
            LayoutMode.VERTICAL_BOX: VerticalBoxSegmenter(),
            LayoutMode.HORIZONTAL_BOX: HorizontalBoxSegmenter(),
        }
        if strategies:
            self._strategies.update({LayoutMode.coerce(mode): strategy for mode, strategy in strategies.items()})

    @property
    def classifier(self) -> UnicodeClassifier:
        return self._classifier

    def strategy_for(self, mode: LayoutMode | str) -> SegmentationStrategy:
        """Return the strategy registered for ``mode``."""
        return self._strategies[LayoutMode.coerce(mode)]

    def segment(
        self,
        text: str,
        mode: LayoutMode | str,
        font_size: int | float,
        line_height: int | float,
        max_width: Optional[float] = None,
    ) -> TokenSequence:
        """Return a freshly built token sequence for ``text`` in ``mode``."""
        layout = LayoutMode.coerce(mode)
        spacing = compute_line_spacing(font_size, line_height)
        strategy = self._strategies[layout]
        normalized = self._normalizer.normalize_text(text)
        LOGGER.debug("Segmenting %d characters for %s layout (spacing %.2f)", len(normalized), layout.value, spacing)
        return tuple(strategy.segment(normalized, self._classifier, spacing, max_width=max_width))
