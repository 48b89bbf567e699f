"""
Path and URL helpers for the admin page adapter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


ASSETS_FOLDER_NAME = "assets"


def get_assets_folder() -> Path:
    """Return the folder holding the bundled JavaScript and stylesheet."""
    return (Path(__file__).resolve().parent / ASSETS_FOLDER_NAME)


def component_url(
    component_dir: str | Path,
    stylesheet_dir: Optional[str | Path],
    stylesheet_uri: str,
) -> str:
    """
    Map a component directory below the theme directory to its public URL.

    The part of ``component_dir`` below ``stylesheet_dir`` is appended to
    ``stylesheet_uri``. A component outside the theme directory maps to the
    theme URL plus its own absolute path, the same as a plain prefix strip.
    """
    component = Path(component_dir).expanduser().resolve()
    base_uri = stylesheet_uri.rstrip("/")
    if stylesheet_dir is None:
        return base_uri + component.as_posix()
    try:
        relative = component.relative_to(Path(stylesheet_dir).expanduser().resolve())
    except ValueError:
        return base_uri + component.as_posix()
    sub_dir = relative.as_posix()
    if sub_dir in ("", "."):
        return base_uri
    return f"{base_uri}/{sub_dir}"


def flag_url(
    flags_dir: Optional[str | Path],
    short_code: str,
    plugin_dir: Optional[str | Path],
    plugin_url: str,
) -> str:
    """
    Return the public URL of a language flag image, or "" when it is absent.

    Flags are looked up as ``<flags_dir>/<short_code>.png``. The URL swaps the
    plugin directory prefix for the plugin URL.
    """
    if not flags_dir:
        return ""
    flag_path = Path(flags_dir).expanduser() / f"{short_code}.png"
    if not flag_path.is_file():
        return ""
    if plugin_dir is None:
        return flag_path.as_posix()
    resolved = flag_path.resolve()
    try:
        relative = resolved.relative_to(Path(plugin_dir).expanduser().resolve())
    except ValueError:
        return resolved.as_posix()
    return f"{plugin_url.rstrip('/')}/{relative.as_posix()}"
