"""Helpers to persist token streams for debugging."""
from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

from text_segmenter.model.token import TokenSequence


class DebugDumper:
    """Writes segmentation results onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, tokens: TokenSequence, metadata: Optional[Mapping[str, Any]] = None) -> Path:
        """Persist the token stream as JSON and return the written file."""
        self.directory.mkdir(parents=True, exist_ok=True)
        payload = {
            "metadata": self._serialize(dict(metadata or {})),
            "tokens": [token.to_dict() for token in tokens],
        }
        target = self.directory / "tokens.json"
        target.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        return target

    def _serialize(self, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if is_dataclass(value):
            return {k: self._serialize(v) for k, v in asdict(value).items()}
        if isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value
