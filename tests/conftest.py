"""
Shared pytest fixtures for admin page tests.

Provides in-memory hosts, sample page configurations, and a page with one
field of every type.
"""

import json
import os
import pytest
from pathlib import Path
from typing import Any, Dict

from adminpage.host import InMemoryHost, MultilingualPlugin
from adminpage.page import AdminPage


# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _restore_env_after_test():
    original = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(original)


# -----------------------------------------------------------------------------
# Configuration Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def sample_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Provide a minimal valid page configuration dictionary.

    Uses tmp_path for the options file to ensure isolation.
    """
    return {
        "page": {
            "settings_id": "theme_options",
            "page_title": "Theme Options",
            "menu_title": "Theme",
            "position": 61,
            "location": "menu",
        },
        "fields": {
            "footer_text": {
                "title": "Footer text",
                "type": "text",
                "description": "Shown below every page.",
                "default": "Powered by us",
            },
            "layout": {
                "title": "Layout",
                "type": "select",
                "options": {"wide": "Wide", "boxed": "Boxed"},
                "default": "wide",
            },
            "show_search": {
                "title": "Show search",
                "type": "checkbox",
            },
        },
        "host": {
            "locale": "en_US",
            "options_file": str(tmp_path / "options.json"),
        },
    }


@pytest.fixture
def sample_config_file(tmp_path: Path, sample_config_dict: Dict[str, Any]) -> Path:
    """
    Create a temporary JSON config file.

    Returns the path to the created config file.
    """
    config_path = tmp_path / "adminpage.json"
    config_path.write_text(json.dumps(sample_config_dict, indent=2))
    return config_path


# -----------------------------------------------------------------------------
# Host Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def host() -> InMemoryHost:
    """In-memory host with an administrator and an en_US locale."""
    return InMemoryHost(locale="en_US")


@pytest.fixture
def flags_dir(tmp_path: Path) -> Path:
    """Plugin folder holding flag images for en and de (no fr flag)."""
    folder = tmp_path / "plugins" / "multilingual" / "res" / "flags"
    folder.mkdir(parents=True)
    (folder / "en.png").write_bytes(b"png")
    (folder / "de.png").write_bytes(b"png")
    return folder


@pytest.fixture
def multilingual_host(tmp_path: Path, flags_dir: Path) -> InMemoryHost:
    """Host with a multilingual plugin offering en-US, de-DE and fr-FR."""
    plugin = MultilingualPlugin(languages=["en-US", "de-DE", "fr-FR"], flags_dir=flags_dir)
    return InMemoryHost(
        locale="en_US",
        multilingual=plugin,
        plugin_directory=tmp_path / "plugins",
        plugin_url="https://example.test/wp-content/plugins",
    )


@pytest.fixture
def theme_page(host: InMemoryHost) -> AdminPage:
    """Page with one field of every type, registered on ``host``."""
    page = AdminPage(host, "theme_options", "Theme Options", "Theme")
    page.add_fields(
        {
            "footer_text": {"title": "Footer text", "description": "Shown below every page."},
            "tracking_id": {"title": "Tracking id", "type": "hidden"},
            "custom_css": {"title": "Custom CSS", "type": "textarea"},
            "layout": {
                "title": "Layout",
                "type": "select",
                "options": {"wide": "Wide", "boxed": "Boxed"},
            },
            "show_search": {"title": "Show search", "type": "checkbox"},
        }
    )
    return page
