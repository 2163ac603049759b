"""Half-leading computation from a font size and a line height."""
from __future__ import annotations

from text_segmenter.utils.errors import InvalidLineHeightError


def compute_line_spacing(font_size: int | float, line_height: int | float) -> float:
    """Return the half-leading added above and below each glyph box.

    A ``float`` line height is a multiplier of the font size; an ``int`` line
    height is the absolute height of a line. Both express the total height of
    the line, so the result is half of what exceeds the font size.
    """
    if isinstance(line_height, bool):
        raise InvalidLineHeightError(line_height)
    if isinstance(line_height, float):
        return (font_size * line_height - font_size) / 2.0
    if isinstance(line_height, int):
        return (line_height - font_size) / 2.0
    raise InvalidLineHeightError(line_height)
