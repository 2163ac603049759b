"""
Text normalization applied before segmentation.

Collapses the different newline conventions into ``\\n`` and optionally removes
control characters that have no visual representation.
"""

import re


class TextNormalizer:
    """Normalizes label text prior to segmentation."""

    # CRLF first so it collapses into a single newline
    NEWLINE_PATTERN = re.compile(r'\r\n?')

    # Control characters except tab and newline; CR is handled above
    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0e-\x1f\x7f-\x84\x86-\x9f]')

    def __init__(self, strip_control_chars: bool = False):
        """Initialize text normalizer.

        Args:
            strip_control_chars: If True, drop C0/C1 control characters other
                                 than tab, newline and the line-breaking
                                 controls (VT, FF, NEL).
        """
        self.strip_control_chars = strip_control_chars

    def normalize_text(self, text: str) -> str:
        """Normalize newlines and optionally control characters."""
        if not text:
            return text

        normalized = self._normalize_newlines(text)

        if self.strip_control_chars:
            normalized = self._remove_control_chars(normalized)

        return normalized

    def _normalize_newlines(self, text: str) -> str:
        """Replace CRLF and lone CR with LF."""
        return self.NEWLINE_PATTERN.sub('\n', text)

    def _remove_control_chars(self, text: str) -> str:
        """Remove control characters that cannot be drawn."""
        return self.CONTROL_CHARS_PATTERN.sub('', text)


def normalize_label_text(text: object, strip_control_chars: bool = False) -> str:
    """Convenience function coercing any value to normalized label text.

    Args:
        text: Value to display; ``None`` becomes the empty string and any
              other object is converted with ``str()``
        strip_control_chars: Whether to drop undrawable control characters

    Returns:
        Normalized text string
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return TextNormalizer(strip_control_chars=strip_control_chars).normalize_text(text)
