"""Host component holding label text and its current token stream."""
from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Dict, Mapping, Optional

from text_segmenter.model.label_style import (
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_HEIGHT,
    DEFAULT_TEXT_ALIGN,
    Color,
    FontSpec,
    TextEdge,
    TextShadow,
)
from text_segmenter.model.settings import DEFAULT_LAYOUT
from text_segmenter.model.token import LayoutMode, TokenSequence
from text_segmenter.segmentation.dispatcher import SegmentationDispatcher
from text_segmenter.utils.logger import get_logger
from text_segmenter.utils.text_normalizer import normalize_label_text

LOGGER = get_logger(__name__)

_EDGE_KEYS = ("color", "width", "level")
_SHADOW_KEYS = ("edge", "color", "x", "y")


class TextLabel:
    """A simple component that draws a string.

    Text, layout, line height, font and width are configuration: changing any
    of them invalidates the token stream, which is rebuilt before the next
    layout or draw pass reads it.
    """

    def __init__(
        self,
        id: str = "",
        text: object = "",
        x: float = 0,
        y: float = 0,
        dispatcher: Optional[SegmentationDispatcher] = None,
    ) -> None:
        self.id = id
        self.x = x
        self.y = y
        self.visible = True
        self.aa = False
        self.color: Optional[Color] = None
        self.text_edge: bool | Mapping[str, object] | TextEdge | None = None
        self.text_shadow: bool | Mapping[str, object] | TextShadow | None = None
        self.style: Dict[str, object] = {"align_items": "top", "justify_content": DEFAULT_TEXT_ALIGN}

        self._dispatcher = dispatcher or SegmentationDispatcher()
        self._text = ""
        self._layout = DEFAULT_LAYOUT
        self._line_height: int | float = DEFAULT_LINE_HEIGHT
        self._font = FontSpec()
        self._width: Optional[float] = None
        self._tokens: TokenSequence = ()
        self._dirty = True
        self.text = text

    # ------------------------------------------------------------------
    # Segmentation inputs
    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: object) -> None:
        self._text = normalize_label_text(value)
        self._invalidate()

    @property
    def layout(self) -> LayoutMode:
        return self._layout

    @layout.setter
    def layout(self, value: LayoutMode | str) -> None:
        self._layout = LayoutMode.coerce(value)
        self._invalidate()

    @property
    def line_height(self) -> int | float:
        return self._line_height

    @line_height.setter
    def line_height(self, value: int | float) -> None:
        self._line_height = value
        self._invalidate()

    @property
    def font(self) -> FontSpec:
        return self._font

    @font.setter
    def font(self, value: object) -> None:
        if isinstance(value, FontSpec):
            self._font = value
        elif isinstance(value, str):
            self._font = FontSpec(size=DEFAULT_FONT_SIZE, name=value)
        else:
            self._font = FontSpec(size=DEFAULT_FONT_SIZE, name=str(value))
        self._invalidate()

    @property
    def width(self) -> Optional[float]:
        return self._width

    @width.setter
    def width(self, value: Optional[float]) -> None:
        self._width = value
        self._invalidate()

    @property
    def text_align(self) -> object:
        return self.style["justify_content"]

    @text_align.setter
    def text_align(self, align: object) -> None:
        self.style["justify_content"] = align

    # ------------------------------------------------------------------
    # Token stream
    @property
    def tokens(self) -> TokenSequence:
        """Current token stream, re-segmented first if an input changed."""
        if self._dirty:
            self.segment()
        return self._tokens

    def segment(self) -> TokenSequence:
        """Rebuild the token stream from the current configuration."""
        tokens = self._dispatcher.segment(
            self._text, self._layout, self._font.size, self._line_height, max_width=self._width
        )
        self._tokens = tokens
        self._dirty = False
        LOGGER.debug("Label %r segmented into %d tokens (%s)", self.id, len(tokens), self._layout.value)
        return tokens

    def resize(self) -> TokenSequence:
        """Layout pass hook: always re-segments before the layouter runs."""
        return self.segment()

    def visible_tokens(self) -> TokenSequence:
        if not self.visible:
            return ()
        return self.tokens

    def _invalidate(self) -> None:
        self._dirty = True

    # ------------------------------------------------------------------
    # Drawing parameters
    def uses_antialias(self) -> bool:
        """Anti-aliased drawing is needed for outlines and shadows too."""
        return bool(self.aa or self.text_edge or self.text_shadow)

    def draw_params(self) -> Dict[str, object]:
        """Return the parameter mapping handed to the rendering backend."""
        params: Dict[str, object] = {}
        if self.text_edge:
            params["edge"] = True
            for key, value in _decoration_items(self.text_edge, _EDGE_KEYS):
                params[f"edge_{key}"] = value
        if self.text_shadow:
            params["shadow"] = True
            for key, value in _decoration_items(self.text_shadow, _SHADOW_KEYS):
                params[f"shadow_{key}"] = value
        if self.color:
            params["color"] = self.color
        return params


def _decoration_items(decoration: object, keys: tuple[str, ...]):
    """Yield the set (truthy) entries of an edge or shadow setting."""
    if is_dataclass(decoration):
        values = asdict(decoration)
    elif isinstance(decoration, Mapping):
        values = decoration
    else:
        return
    for key in keys:
        value = values.get(key)
        if value:
            yield key, value
