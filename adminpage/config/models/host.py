"""
Reference host configuration models.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .constants import (
    DEFAULT_CAPABILITY,
    DEFAULT_LOCALE,
    LOCALE_ENV_VAR,
    OPTIONS_FILE_ENV_VAR,
)


@dataclass
class HostConfig:
    """
    Settings for the in-memory reference host.
    """

    locale: str = DEFAULT_LOCALE
    """Site locale, e.g. 'en_US'."""

    options_file: Optional[Path] = None
    """JSON file backing the option store. In-memory when None."""

    stylesheet_directory: Optional[Path] = None
    """Active theme directory on disk."""

    stylesheet_directory_uri: str = ""
    """Public URL of the active theme directory."""

    plugin_directory: Optional[Path] = None
    """Plugin directory on disk."""

    plugin_url: str = ""
    """Public URL of the plugin directory."""

    capabilities: List[str] = field(default_factory=lambda: [DEFAULT_CAPABILITY])
    """Capabilities granted to the current user."""

    def __post_init__(self) -> None:
        env_locale = os.environ.get(LOCALE_ENV_VAR)
        if env_locale:
            self.locale = env_locale

        env_options = os.environ.get(OPTIONS_FILE_ENV_VAR)
        if env_options and self.options_file is None:
            self.options_file = Path(env_options)

        for attr in ("options_file", "stylesheet_directory", "plugin_directory"):
            value = getattr(self, attr)
            if isinstance(value, str):
                value = Path(value) if value else None
            if value is not None:
                value = value.expanduser()
            setattr(self, attr, value)

        self.capabilities = [
            str(cap).strip() for cap in (self.capabilities or []) if str(cap).strip()
        ]

    def validate(self) -> None:
        if not self.locale:
            raise ValueError("host.locale must not be empty")
        if "-" in self.locale:
            raise ValueError(
                f"host.locale uses underscores (e.g. 'en_US'), got '{self.locale}'"
            )


@dataclass
class MultilingualConfig:
    """
    Active languages exposed by a multilingual plugin.
    """

    languages: List[str] = field(default_factory=list)
    """Language tags such as 'en-US' or 'de-DE'."""

    flags_dir: Optional[Path] = None
    """Directory holding '<short code>.png' flag images."""

    def __post_init__(self) -> None:
        self.languages = [str(tag).strip() for tag in (self.languages or []) if str(tag).strip()]
        if isinstance(self.flags_dir, str):
            self.flags_dir = Path(self.flags_dir) if self.flags_dir else None
        if self.flags_dir is not None:
            self.flags_dir = self.flags_dir.expanduser()

    def validate(self) -> None:
        if not self.languages:
            raise ValueError("multilingual.languages must be a non-empty list")
        seen = set()
        for tag in self.languages:
            if tag in seen:
                raise ValueError(f"Duplicate multilingual language: {tag}")
            seen.add(tag)
