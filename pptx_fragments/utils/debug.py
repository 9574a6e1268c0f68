"""Helpers to persist parsed descriptors for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Sequence

from pptx_fragments.model.master_model import SlideMasterSpec


class DebugDumper:
    """Writes parsed slide masters onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, masters: Sequence[SlideMasterSpec]) -> Path:
        """Persist the parsed masters as JSON and return the written path."""
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / "masters.json"
        target.write_text(json.dumps(self._serialize(list(masters)), indent=2))
        return target

    def _serialize(self, value: Any) -> Any:
        if is_dataclass(value):
            return {f.name: self._serialize(getattr(value, f.name)) for f in fields(value)}
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {k: self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        return value
