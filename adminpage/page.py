"""
Settings page registered with a host content-management system.

``AdminPage`` wires a declarative field list into the host's settings API:
it registers the option record and its section on ``admin_init``, adds the
menu page on ``admin_menu``, and renders each field as HTML when the host
asks for it. Storage, access control and page chrome stay with the host.
"""

from __future__ import annotations

from dataclasses import replace
from html import escape
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from adminpage.config.loader import build_field_config
from adminpage.config.models import (
    DEFAULT_CAPABILITY,
    DEFAULT_LOCATION,
    AdminPageConfig,
    FieldConfig,
    PageConfig,
)
from adminpage.errors import InvalidLocationError, MissingDependencyError
from adminpage.fields import render_field, render_language_toggles, resolve_default, resolve_value
from adminpage.host.base import Host
from adminpage.logging import get_logger
from adminpage.paths import component_url, get_assets_folder

logger = get_logger(__name__)

SCRIPT_HANDLE = "magic-admin-page-js"
STYLE_HANDLE = "magic-admin-page-css"
PERMISSION_MESSAGE = "You do not have sufficient permissions to access this page."
MULTILINGUAL_MESSAGE = "To enable multilingual fields, a multilingual plugin is required."


class AdminPage:
    """
    A settings page whose fields are stored as one option record.

    The record maps each field name to a mapping of language code to value,
    e.g. ``{"footer_text": {"en_US": "Hi", "de_DE": "Hallo"}}``.
    """

    def __init__(
        self,
        host: Host,
        settings_id: str,
        page_title: str,
        menu_title: str,
        position: Optional[Union[int, float]] = None,
        icon_url: str = "",
        capability: str = DEFAULT_CAPABILITY,
        location: str = DEFAULT_LOCATION,
        *,
        assets_url: Optional[str] = None,
    ) -> None:
        self.host = host
        self.page = PageConfig(
            settings_id=settings_id,
            page_title=page_title,
            menu_title=menu_title,
            position=position,
            icon_url=icon_url,
            capability=capability,
            location=location,
        )
        self.assets_url = assets_url
        self.fields: Dict[str, FieldConfig] = {}
        self.hook_suffix: Optional[str] = None

        host.add_action("admin_init", self.register_settings)
        host.add_action("admin_menu", self.register_admin_page)

    @classmethod
    def from_config(
        cls,
        host: Host,
        config: AdminPageConfig,
        *,
        assets_url: Optional[str] = None,
    ) -> "AdminPage":
        """Create a page and add every field from a loaded configuration."""
        page = config.page
        admin_page = cls(
            host,
            page.settings_id,
            page.page_title,
            page.menu_title,
            position=page.position,
            icon_url=page.icon_url,
            capability=page.capability,
            location=page.location,
            assets_url=assets_url,
        )
        for field_config in config.fields.values():
            admin_page.add_field(field_config)
        return admin_page

    @property
    def settings_id(self) -> str:
        return self.page.settings_id

    @property
    def menu_slug(self) -> str:
        return self.page.menu_slug

    # ------------------------------------------------------------------
    # Field registry
    # ------------------------------------------------------------------

    def add_field(self, field: Union[FieldConfig, Mapping[str, Any]]) -> None:
        """Add a field, replacing any earlier field with the same name."""
        if not isinstance(field, FieldConfig):
            field = build_field_config(dict(field))
        if field.name in self.fields:
            logger.debug("Replacing field '%s' on page '%s'", field.name, self.settings_id)
        self.fields[field.name] = field

    def add_fields(self, fields: Mapping[str, Union[FieldConfig, Mapping[str, Any]]]) -> None:
        """Add several fields; each mapping key becomes the field's name."""
        for key, field in fields.items():
            if isinstance(field, FieldConfig):
                self.add_field(replace(field, name=key, extra=dict(field.extra)))
            else:
                self.add_field(build_field_config(dict(field), name=key))

    # ------------------------------------------------------------------
    # Host callbacks
    # ------------------------------------------------------------------

    def register_settings(self) -> None:
        """Register the option record and the page's single section."""
        self.host.register_setting(self.settings_id, self.settings_id)
        self.host.add_settings_section(
            self.settings_id,
            self.page.menu_title,
            self.section_config,
            self.menu_slug,
        )

    def section_config(self) -> None:
        """Register one settings row per field."""
        for key, field in self.fields.items():
            args = field.to_args()
            args["id"] = key
            self.host.add_settings_field(
                key,
                field.title,
                self.render_settings_field,
                self.menu_slug,
                self.settings_id,
                args,
            )

    def render_settings_field(self, args: Mapping[str, Any]) -> str:
        """
        Render one field row.

        Multilingual fields get one input per active language of the
        multilingual plugin plus flag toggles; other fields get a single
        input for the site locale.

        Raises:
            MissingDependencyError: If the field is multilingual and the host
                has no multilingual plugin.
            InvalidFieldError: If a select field has no options.
        """
        field_id = args["id"]
        options = self.host.get_option(self.settings_id)
        if not isinstance(options, Mapping):
            options = {}
        stored = options.get(field_id)
        if not isinstance(stored, Mapping):
            stored = {}

        field_type = args.get("type") or "text"
        locale = self.host.get_locale()
        languages: List[str] = [locale]
        is_multilingual = bool(args.get("multilang"))
        flags_dir: Optional[Path] = None

        if is_multilingual:
            plugin = getattr(self.host, "multilingual", None)
            if plugin is None:
                logger.error("Field '%s' is multilingual but no multilingual plugin is active", field_id)
                raise MissingDependencyError(MULTILINGUAL_MESSAGE)
            languages = plugin.language_codes()
            flags_dir = plugin.flags_dir

        markup = '<div class="magic-admin-page-field-wrapper">'

        if is_multilingual:
            markup += render_language_toggles(
                languages,
                flags_dir,
                getattr(self.host, "plugin_directory", None),
                getattr(self.host, "plugin_url", ""),
            )

        css_class = f"magic-admin-page-input {field_type}"
        for language in languages:
            default = resolve_default(args.get("default", ""), language)
            value = resolve_value(stored.get(language), default, field_type)

            if args.get("description") is not None:
                markup += f'<p class="howto">{args["description"]}</p>'

            markup += render_field(
                language,
                locale,
                field_type,
                f"{self.settings_id}[{field_id}][{language}]",
                value,
                css_class,
                f"{field_id}-{language}",
                args,
            )

        markup += "</div>"
        return markup

    def register_admin_page(self) -> None:
        """
        Add the page to the host menu and hook asset loading to it.

        Raises:
            InvalidLocationError: If the host has no such menu location.
        """
        location = self.page.location
        if location not in self.host.page_locations:
            raise InvalidLocationError(f'Position "{location}" is not valid.')
        self.hook_suffix = self.host.add_page(
            location,
            self.page.page_title,
            self.page.menu_title,
            self.page.capability,
            self.menu_slug,
            self.render_admin_page,
            self.page.icon_url,
            self.page.position,
        )
        self.host.add_action(f"load-{self.hook_suffix}", self.enqueue_scripts)

    def render_admin_page(self) -> str:
        """Render the page chrome around the host's settings form."""
        if not self.host.current_user_can(self.page.capability):
            self.host.die(PERMISSION_MESSAGE)
        return (
            '<div class="wrap">'
            f"{self.host.settings_errors()}"
            f"<h2>{escape(self.page.page_title)}</h2>"
            "<br>"
            '<form method="POST" action="options.php">'
            f"{self.host.settings_fields(self.settings_id)}"
            f"{self.host.do_settings_sections(self.menu_slug)}"
            f"{self.host.submit_button()}"
            "</form>"
            "</div>"
        )

    def enqueue_scripts(self) -> None:
        """Queue the toggle script and stylesheet once the page starts loading."""

        def _enqueue(hook_suffix: Optional[str] = None) -> None:
            base_url = self.component_url()
            self.host.enqueue_script(SCRIPT_HANDLE, f"{base_url}/js/magic-admin-page.js")
            self.host.enqueue_style(STYLE_HANDLE, f"{base_url}/css/magic-admin-page.css")

        self.host.add_action("admin_enqueue_scripts", _enqueue)

    def component_url(self) -> str:
        """Public URL of the bundled assets folder."""
        if self.assets_url:
            return self.assets_url.rstrip("/")
        return component_url(
            get_assets_folder(),
            self.host.stylesheet_directory,
            self.host.stylesheet_directory_uri,
        )

    # ------------------------------------------------------------------
    # Reading options
    # ------------------------------------------------------------------

    @staticmethod
    def get_option(host: Host, option_name: str, language: Optional[str] = None) -> Dict[str, Any]:
        """
        Return the stored values of one language.

        Args:
            host: Host owning the option store.
            option_name: Settings identifier of the page.
            language: Language code; defaults to the site locale.

        Returns:
            Field name to value, for the fields stored in that language only.
        """
        language = language or host.get_locale()
        result: Dict[str, Any] = {}
        options = host.get_option(option_name)
        if not options or not isinstance(options, Mapping):
            return result
        for key, value in options.items():
            if isinstance(value, Mapping) and language in value:
                result[key] = value[language]
        return result
