"""
Multilingual plugin exposing the site's active languages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from adminpage.config.models import MultilingualConfig


@dataclass
class MultilingualPlugin:
    """Active language list and flag images of an installed multilingual plugin."""

    languages: List[str] = field(default_factory=list)
    flags_dir: Optional[Path] = None

    @classmethod
    def from_config(cls, config: MultilingualConfig) -> "MultilingualPlugin":
        return cls(languages=list(config.languages), flags_dir=config.flags_dir)

    def get_active_languages(self) -> List[Dict[str, Any]]:
        """Return one record per active language, keyed the way the plugin reports them."""
        return [
            {"code": tag.split("-", 1)[0], "tag": tag}
            for tag in self.languages
        ]

    def language_codes(self) -> List[str]:
        """Return active language tags as locale codes ('de-DE' becomes 'de_DE')."""
        return [entry["tag"].replace("-", "_") for entry in self.get_active_languages()]
