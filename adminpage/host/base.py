"""
Host platform contract consumed by the admin page adapter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol, Sequence

from .multilang import MultilingualPlugin


class Host(Protocol):
    """Protocol for content-management hosts that own pages, options and users."""

    page_locations: Sequence[str]
    stylesheet_directory: Optional[Path]
    stylesheet_directory_uri: str
    plugin_directory: Optional[Path]
    plugin_url: str
    multilingual: Optional[MultilingualPlugin]

    def add_action(self, hook: str, callback: Callable[..., Any]) -> None:
        """Run ``callback`` whenever ``hook`` fires."""

    def do_action(self, hook: str, *args: Any) -> None:
        """Fire ``hook``."""

    def register_setting(self, option_group: str, option_name: str) -> None:
        """Allow ``option_name`` to be saved from forms of ``option_group``."""

    def add_settings_section(
        self,
        section_id: str,
        title: str,
        callback: Callable[[], Any],
        page: str,
    ) -> None:
        """Add a section to a settings page."""

    def add_settings_field(
        self,
        field_id: str,
        title: str,
        callback: Callable[[Dict[str, Any]], str],
        page: str,
        section: str,
        args: Dict[str, Any],
    ) -> None:
        """Add a field row to a settings section."""

    def get_option(self, name: str, default: Any = None) -> Any:
        """Read a stored option."""

    def update_option(self, name: str, value: Any) -> None:
        """Store an option."""

    def get_locale(self) -> str:
        """Return the site locale, e.g. 'en_US'."""

    def current_user_can(self, capability: str) -> bool:
        """Return True when the current user holds ``capability``."""

    def add_page(
        self,
        location: str,
        page_title: str,
        menu_title: str,
        capability: str,
        menu_slug: str,
        callback: Callable[[], str],
        icon_url: str = "",
        position: Optional[float] = None,
    ) -> str:
        """Register an admin page and return its page hook suffix."""

    def enqueue_script(self, handle: str, src: str) -> None:
        """Queue a script for the current admin page."""

    def enqueue_style(self, handle: str, src: str) -> None:
        """Queue a stylesheet for the current admin page."""

    def die(self, message: str) -> None:
        """Abort the request with the host's denial page."""

    def settings_errors(self) -> str:
        """Return queued settings notices as markup."""

    def settings_fields(self, option_group: str) -> str:
        """Return the hidden form fields for ``option_group``."""

    def do_settings_sections(self, page: str) -> str:
        """Return the markup of every section registered on ``page``."""

    def submit_button(self) -> str:
        """Return the form submit button markup."""
