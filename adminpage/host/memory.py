"""
In-memory reference host.

Implements the ``Host`` protocol closely enough to register, render and
submit a settings page without a real content-management system. Used by
the CLI and the test suite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from adminpage.config.models import (
    DEFAULT_CAPABILITY,
    DEFAULT_LOCALE,
    PAGE_LOCATIONS,
    HostConfig,
    MultilingualConfig,
)
from adminpage.errors import InvalidLocationError, PermissionDeniedError
from adminpage.logging import get_logger

from .forms import parse_form_pairs
from .multilang import MultilingualPlugin
from .options import JsonOptionStore, OptionStore

logger = get_logger(__name__)

# Registered while serving a page and only valid for that request.
_REQUEST_HOOKS = ("admin_enqueue_scripts",)

_HOOK_PREFIXES = {
    "menu": "toplevel",
    "options": "settings",
    "theme": "appearance",
    "management": "tools",
}


@dataclass
class SettingsSection:
    section_id: str
    title: str
    callback: Callable[[], Any]


@dataclass
class SettingsField:
    field_id: str
    title: str
    callback: Callable[[Dict[str, Any]], str]
    args: Dict[str, Any] = field(default_factory=dict)


@dataclass
class AdminMenuPage:
    """An admin page registered through ``add_page``."""

    location: str
    page_title: str
    menu_title: str
    capability: str
    menu_slug: str
    callback: Callable[[], str]
    icon_url: str = ""
    position: Optional[float] = None
    hook_suffix: str = ""


@dataclass
class SettingsNotice:
    setting: str
    code: str
    message: str
    type: str = "error"


class InMemoryHost:
    """
    Reference host keeping hooks, settings, pages and options in memory.
    """

    page_locations: Sequence[str] = PAGE_LOCATIONS

    def __init__(
        self,
        *,
        locale: str = DEFAULT_LOCALE,
        options: Optional[OptionStore] = None,
        capabilities: Iterable[str] = (DEFAULT_CAPABILITY,),
        multilingual: Optional[MultilingualPlugin] = None,
        stylesheet_directory: Optional[Path] = None,
        stylesheet_directory_uri: str = "",
        plugin_directory: Optional[Path] = None,
        plugin_url: str = "",
        options_capability: str = DEFAULT_CAPABILITY,
    ) -> None:
        self.locale = locale
        self.options = options if options is not None else OptionStore()
        self.capabilities = set(capabilities)
        self.multilingual = multilingual
        self.stylesheet_directory = stylesheet_directory
        self.stylesheet_directory_uri = stylesheet_directory_uri
        self.plugin_directory = plugin_directory
        self.plugin_url = plugin_url
        self.options_capability = options_capability

        self._actions: Dict[str, List[Callable[..., Any]]] = {}
        self._fired: List[str] = []
        self.registered_settings: Dict[str, List[str]] = {}
        self.sections: Dict[str, Dict[str, SettingsSection]] = {}
        self.fields: Dict[str, Dict[str, Dict[str, SettingsField]]] = {}
        self.pages: Dict[str, AdminMenuPage] = {}
        self.scripts: Dict[str, str] = {}
        self.styles: Dict[str, str] = {}
        self._notices: List[SettingsNotice] = []
        self._booted = False

    @classmethod
    def from_config(
        cls,
        config: HostConfig,
        multilingual: Optional[MultilingualConfig] = None,
    ) -> "InMemoryHost":
        """Build a host from its configuration section."""
        store: OptionStore
        if config.options_file is not None:
            store = JsonOptionStore(config.options_file)
        else:
            store = OptionStore()
        plugin = MultilingualPlugin.from_config(multilingual) if multilingual is not None else None
        return cls(
            locale=config.locale,
            options=store,
            capabilities=config.capabilities,
            multilingual=plugin,
            stylesheet_directory=config.stylesheet_directory,
            stylesheet_directory_uri=config.stylesheet_directory_uri,
            plugin_directory=config.plugin_directory,
            plugin_url=config.plugin_url,
        )

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def add_action(self, hook: str, callback: Callable[..., Any]) -> None:
        self._actions.setdefault(hook, []).append(callback)

    def has_action(self, hook: str) -> bool:
        return bool(self._actions.get(hook))

    def do_action(self, hook: str, *args: Any) -> None:
        callbacks = list(self._actions.get(hook, []))
        logger.debug("Firing '%s' for %d callback(s)", hook, len(callbacks))
        self._fired.append(hook)
        for callback in callbacks:
            callback(*args)

    def did_action(self, hook: str) -> int:
        return self._fired.count(hook)

    def boot(self) -> None:
        """Fire the admin lifecycle hooks once, as the host does on each admin request."""
        if self._booted:
            return
        self._booted = True
        self.do_action("admin_init")
        self.do_action("admin_menu")

    # ------------------------------------------------------------------
    # Options and users
    # ------------------------------------------------------------------

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def update_option(self, name: str, value: Any) -> None:
        self.options.set(name, value)
        logger.info("Updated option '%s'", name)

    def get_locale(self) -> str:
        return self.locale

    def current_user_can(self, capability: str) -> bool:
        return capability in self.capabilities

    def die(self, message: str) -> None:
        logger.warning("Request denied: %s", message)
        raise PermissionDeniedError(message)

    # ------------------------------------------------------------------
    # Settings API
    # ------------------------------------------------------------------

    def register_setting(self, option_group: str, option_name: str) -> None:
        names = self.registered_settings.setdefault(option_group, [])
        if option_name not in names:
            names.append(option_name)

    def add_settings_section(
        self,
        section_id: str,
        title: str,
        callback: Callable[[], Any],
        page: str,
    ) -> None:
        self.sections.setdefault(page, {})[section_id] = SettingsSection(section_id, title, callback)

    def add_settings_field(
        self,
        field_id: str,
        title: str,
        callback: Callable[[Dict[str, Any]], str],
        page: str,
        section: str,
        args: Dict[str, Any],
    ) -> None:
        page_fields = self.fields.setdefault(page, {})
        page_fields.setdefault(section, {})[field_id] = SettingsField(
            field_id, title, callback, dict(args or {})
        )

    def add_settings_error(self, setting: str, code: str, message: str, type: str = "error") -> None:
        self._notices.append(SettingsNotice(setting, code, message, type))

    def settings_errors(self) -> str:
        notices, self._notices = self._notices, []
        return "".join(
            f'<div id="setting-error-{escape(notice.code)}" '
            f'class="notice notice-{escape(notice.type)} settings-error is-dismissible">'
            f"<p><strong>{escape(notice.message)}</strong></p></div>"
            for notice in notices
        )

    def settings_fields(self, option_group: str) -> str:
        return (
            f'<input type="hidden" name="option_page" value="{escape(option_group)}">'
            '<input type="hidden" name="action" value="update">'
        )

    def do_settings_sections(self, page: str) -> str:
        """Render every section on ``page`` with its field table."""
        markup = ""
        for section in list(self.sections.get(page, {}).values()):
            if section.title:
                markup += f"<h2>{escape(section.title)}</h2>\n"
            result = section.callback()
            if isinstance(result, str):
                markup += result

            section_fields = self.fields.get(page, {}).get(section.section_id, {})
            if not section_fields:
                continue
            markup += '<table class="form-table" role="presentation">'
            for settings_field in section_fields.values():
                markup += (
                    f'<tr><th scope="row">{escape(settings_field.title)}</th>'
                    f"<td>{settings_field.callback(settings_field.args)}</td></tr>"
                )
            markup += "</table>"
        return markup

    def submit_button(self) -> str:
        return (
            '<p class="submit"><input type="submit" name="submit" id="submit" '
            'class="button button-primary" value="Save Changes"></p>'
        )

    # ------------------------------------------------------------------
    # Menu pages and assets
    # ------------------------------------------------------------------

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
        if location not in self.page_locations:
            raise InvalidLocationError(f'Position "{location}" is not valid.')
        hook_suffix = f"{_HOOK_PREFIXES.get(location, location)}_page_{menu_slug}"
        self.pages[menu_slug] = AdminMenuPage(
            location=location,
            page_title=page_title,
            menu_title=menu_title,
            capability=capability,
            menu_slug=menu_slug,
            callback=callback,
            icon_url=icon_url,
            position=position,
            hook_suffix=hook_suffix,
        )
        logger.info("Registered admin page '%s' under '%s'", menu_slug, location)
        return hook_suffix

    def enqueue_script(self, handle: str, src: str) -> None:
        self.scripts[handle] = src

    def enqueue_style(self, handle: str, src: str) -> None:
        self.styles[handle] = src

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def _start_request(self) -> None:
        """Drop hooks and assets queued by the previous page request."""
        for hook in _REQUEST_HOOKS:
            self._actions.pop(hook, None)
        self.scripts.clear()
        self.styles.clear()

    def load_page(self, menu_slug: str) -> str:
        """
        Serve an admin page request and return its markup.

        Raises:
            KeyError: If no page is registered under ``menu_slug``.
            PermissionDeniedError: If the current user lacks the page capability.
        """
        self.boot()
        page = self.pages[menu_slug]
        self._start_request()
        self.do_action(f"load-{page.hook_suffix}")
        self.do_action("admin_enqueue_scripts", page.hook_suffix)
        if not self.current_user_can(page.capability):
            self.die("Sorry, you are not allowed to access this page.")
        return page.callback()

    def submit_options(self, option_page: str, pairs: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
        """
        Save a settings form post.

        Only options registered for ``option_page`` are written; any other
        posted names are ignored.

        Returns:
            Mapping of saved option name to stored value.
        """
        self.boot()
        allowed = self.registered_settings.get(option_page)
        if allowed is None:
            self.die(f"The {option_page} options page is not in the allowed options list.")
        if not self.current_user_can(self.options_capability):
            self.die("Sorry, you are not allowed to manage options for this site.")

        data = parse_form_pairs(pairs)
        saved: Dict[str, Any] = {}
        for option_name in allowed:
            value = data.get(option_name)
            self.update_option(option_name, value)
            saved[option_name] = value

        self.add_settings_error("general", "settings_updated", "Settings saved.", "success")
        return saved
