"""Entry-point for the text segmentation pipeline."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from text_segmenter.classifier.unicode_classifier import get_classifier
from text_segmenter.model.settings import SegmentationSettings
from text_segmenter.model.token import LayoutMode, TokenSequence
from text_segmenter.segmentation.dispatcher import SegmentationDispatcher
from text_segmenter.utils.debug import DebugDumper
from text_segmenter.utils.logger import get_logger
from text_segmenter.utils.metrics import estimate_text_width

LOGGER = get_logger(__name__)


def segment_text(text: str, settings: Optional[SegmentationSettings] = None) -> TokenSequence:
    """Segment ``text`` according to ``settings`` (defaults when omitted)."""
    settings = settings or SegmentationSettings()
    dispatcher = SegmentationDispatcher(
        classifier=get_classifier(settings.narrow_classes),
        preserve_blank_lines=settings.preserve_blank_lines,
        strip_control_chars=settings.strip_control_chars,
    )
    return dispatcher.segment(text, settings.layout, settings.font_size, settings.line_height)


def describe_tokens(tokens: TokenSequence, settings: SegmentationSettings) -> List[Dict[str, object]]:
    """Return token mappings enriched with an estimated width."""
    classifier = get_classifier(settings.narrow_classes)
    described = []
    for token in tokens:
        entry = token.to_dict()
        entry["estimatedWidth"] = estimate_text_width(token.content, settings.font_size, classifier)
        described.append(entry)
    return described


def _parse_line_height(value: str) -> int | float:
    """Integers are absolute heights; anything with a decimal point is a multiplier."""
    try:
        return int(value)
    except ValueError:
        return float(value)


def build_settings(args: argparse.Namespace) -> SegmentationSettings:
    data: Dict[str, object] = {}
    if args.config:
        data.update(json.loads(Path(args.config).read_text(encoding="utf-8")))
    if args.mode is not None:
        data["layout"] = args.mode
    if args.font_size is not None:
        data["font_size"] = args.font_size
    if args.line_height is not None:
        data["line_height"] = args.line_height
    if args.preserve_blank_lines:
        data["preserve_blank_lines"] = True
    return SegmentationSettings.from_mapping(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Split label text into layout tokens")
    parser.add_argument("text", nargs="?", help="Text to segment (use --file to read it from disk)")
    parser.add_argument("--file", help="Read the text from this UTF-8 file")
    parser.add_argument("--mode", choices=[mode.value for mode in LayoutMode], help="Layout mode")
    parser.add_argument("--font-size", type=float, help="Font size used for the line spacing")
    parser.add_argument(
        "--line-height",
        type=_parse_line_height,
        help="Line height: a decimal multiplier (1.5) or an absolute integer height (30)",
    )
    parser.add_argument("--preserve-blank-lines", action="store_true", help="Emit break markers for blank lines in flow mode")
    parser.add_argument("--config", help="JSON file with segmentation settings")
    parser.add_argument("--dump", help="Directory to write tokens.json into")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run text → tokens and print the result as JSON."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
    elif args.text is not None:
        text = args.text
    else:
        parser.error("either TEXT or --file is required")

    settings = build_settings(args)
    LOGGER.info("Segmenting %d characters in %s mode", len(text), settings.layout.value)
    tokens = segment_text(text, settings)
    print(json.dumps(describe_tokens(tokens, settings), indent=2, ensure_ascii=False))

    if args.dump:
        target = DebugDumper(Path(args.dump)).dump(tokens, metadata={"settings": settings})
        LOGGER.info("Wrote %d tokens into %s", len(tokens), target)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
