"""
Top-level configuration model for an admin page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .field import FieldConfig
from .host import HostConfig, MultilingualConfig
from .page import PageConfig


@dataclass
class AdminPageConfig:
    """
    Combines the page descriptor, its fields, and the reference host settings.
    """

    page: PageConfig
    """Page descriptor."""

    fields: Dict[str, FieldConfig] = field(default_factory=dict)
    """Field descriptors keyed by name, in display order."""

    host: HostConfig = field(default_factory=HostConfig)
    """Reference host settings."""

    multilingual: Optional[MultilingualConfig] = None
    """Multilingual plugin settings. None when no such plugin is installed."""

    config_path: Optional[Path] = None
    """Path to the config file (for resolving relative paths)."""

    def __post_init__(self) -> None:
        if self.config_path is None:
            return
        base_dir = self.config_path.parent
        for attr in ("options_file", "stylesheet_directory", "plugin_directory"):
            value = getattr(self.host, attr)
            if value is not None and not value.is_absolute():
                setattr(self.host, attr, (base_dir / value).resolve())
        if self.multilingual is not None and self.multilingual.flags_dir is not None:
            if not self.multilingual.flags_dir.is_absolute():
                self.multilingual.flags_dir = (base_dir / self.multilingual.flags_dir).resolve()

    def validate(self) -> None:
        """Validate entire configuration."""
        self.page.validate()
        self.host.validate()
        for name, field_config in self.fields.items():
            field_config.validate()
            if field_config.name != name:
                raise ValueError(
                    f"fields.{name} is registered under a different name '{field_config.name}'"
                )
        if self.multilingual is not None:
            self.multilingual.validate()
