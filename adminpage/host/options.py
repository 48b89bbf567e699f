"""
Flat key-value option stores.
"""

from __future__ import annotations

import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict

from adminpage.logging import get_logger

logger = get_logger(__name__)


class OptionStore:
    """
    In-memory option store.

    Values are copied on the way in and out so callers cannot mutate the
    stored record in place.
    """

    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        self._options: Dict[str, Any] = deepcopy(initial) if initial else {}

    def get(self, name: str, default: Any = None) -> Any:
        if name not in self._options:
            return default
        return deepcopy(self._options[name])

    def set(self, name: str, value: Any) -> None:
        self._options[name] = deepcopy(value)

    def delete(self, name: str) -> bool:
        if name not in self._options:
            return False
        del self._options[name]
        return True

    def names(self) -> list[str]:
        return sorted(self._options.keys())


class JsonOptionStore(OptionStore):
    """
    Option store persisted to a JSON file.

    The file is read once on construction and rewritten on every change.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()
        initial: Dict[str, Any] = {}
        if self.path.exists():
            content = self.path.read_text(encoding="utf-8").strip()
            if content:
                loaded = json.loads(content)
                if not isinstance(loaded, dict):
                    raise ValueError(f"Options file must hold a JSON object: {self.path}")
                initial = loaded
        super().__init__(initial)

    def set(self, name: str, value: Any) -> None:
        super().set(name, value)
        self._flush()

    def delete(self, name: str) -> bool:
        removed = super().delete(name)
        if removed:
            self._flush()
        return removed

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(self._options, indent=2, sort_keys=True), encoding="utf-8")
        tmp_path.replace(self.path)
        logger.debug("Wrote %d option(s) to %s", len(self._options), self.path)
