"""
Page descriptor model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .constants import DEFAULT_CAPABILITY, DEFAULT_LOCATION, PAGE_LOCATIONS


@dataclass(frozen=True)
class PageConfig:
    """
    Immutable description of where and how the settings page is registered.
    """

    settings_id: str
    """Key under which the whole options blob is stored; also the menu slug."""

    page_title: str
    """Title shown in the page heading and browser title."""

    menu_title: str
    """Label of the menu entry and of the settings section."""

    position: Optional[Union[int, float]] = None
    """Menu position, or None to let the host append."""

    icon_url: str = ""
    """Menu icon URL."""

    capability: str = DEFAULT_CAPABILITY
    """Capability the current user needs to see the page."""

    location: str = DEFAULT_LOCATION
    """Host menu placement (menu, options, theme, ...)."""

    @property
    def menu_slug(self) -> str:
        return self.settings_id

    def validate(self) -> None:
        if not self.settings_id:
            raise ValueError("page.settings_id is required")
        if not self.page_title:
            raise ValueError("page.page_title is required")
        if not self.menu_title:
            raise ValueError("page.menu_title is required")
        if not self.capability:
            raise ValueError("page.capability must not be empty")
        if self.location not in PAGE_LOCATIONS:
            raise ValueError(
                f"page.location must be one of {PAGE_LOCATIONS}, got '{self.location}'"
            )
