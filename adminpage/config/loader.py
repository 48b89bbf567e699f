"""
Configuration loader for the admin page adapter.

Handles loading page definitions from JSON/YAML files and converting
them to typed dataclass models.
"""

from __future__ import annotations

import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv

from adminpage.logging import get_logger

from .models import (
    AdminPageConfig,
    FieldConfig,
    HostConfig,
    MultilingualConfig,
    PageConfig,
    DEFAULT_CAPABILITY,
    DEFAULT_LOCALE,
    DEFAULT_LOCATION,
)

logger = get_logger(__name__)

_FIELD_KEYS = {
    "name",
    "title",
    "type",
    "description",
    "default",
    "options",
    "multiple",
    "height",
    "use_key",
    "multilang",
}


def load_raw_config(path: Path) -> Dict[str, Any]:
    """
    Load raw configuration from JSON or YAML file.

    Also loads environment variables from .env file if present.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Dictionary with raw configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is unsupported
    """
    load_dotenv()

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    return parse_config_text(path.read_text(encoding="utf-8"), path)


def parse_config_text(content: str, path: Path | str) -> Dict[str, Any]:
    """
    Parse raw configuration content from JSON or YAML.

    Args:
        content: Config file content
        path: Path or filename used for extension detection
    """
    if isinstance(path, str):
        path = Path(path)

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        parsed = yaml.safe_load(content) or {}
    elif suffix == ".json":
        parsed = json.loads(content)
    else:
        raise ValueError(
            f"Unsupported config format: {suffix}. "
            f"Use .json, .yaml, or .yml"
        )
    if not isinstance(parsed, dict):
        raise ValueError(f"Config root must be an object, got {type(parsed).__name__}")
    return parsed


def build_field_config(raw: Dict[str, Any], name: Optional[str] = None) -> FieldConfig:
    """
    Build FieldConfig from a raw field descriptor.

    Args:
        raw: Raw descriptor dictionary
        name: Field name; overrides any ``name`` key in ``raw``

    Returns:
        Validated FieldConfig instance
    """
    if not isinstance(raw, dict):
        raise ValueError(f"Field descriptor '{name}' must be an object")

    field_name = name if name is not None else raw.get("name")
    extra = {key: value for key, value in raw.items() if key not in _FIELD_KEYS}
    config = FieldConfig(
        name=field_name,
        title=raw.get("title", ""),
        type=raw.get("type", "text"),
        description=raw.get("description"),
        default=raw.get("default", ""),
        options=raw.get("options"),
        multiple=raw.get("multiple", False),
        height=raw.get("height"),
        use_key=raw.get("use_key", False),
        multilang=raw.get("multilang", False),
        extra=extra,
    )
    config.validate()
    return config


def build_fields_config(raw: Dict[str, Any]) -> Dict[str, FieldConfig]:
    """
    Build the ordered field registry from raw configuration.

    ``fields`` may be a mapping of name to descriptor or a list of
    descriptors that each carry a ``name``. A later descriptor replaces an
    earlier one with the same name.
    """
    fields_raw = raw.get("fields") or {}
    fields: Dict[str, FieldConfig] = {}

    if isinstance(fields_raw, dict):
        for key, descriptor in fields_raw.items():
            fields[str(key)] = build_field_config(descriptor or {}, name=str(key))
    elif isinstance(fields_raw, list):
        for descriptor in fields_raw:
            config = build_field_config(descriptor)
            if config.name in fields:
                logger.debug("Field '%s' redefined; later definition wins", config.name)
            fields[config.name] = config
    else:
        raise ValueError("Config 'fields' must be an object or a list")

    return fields


def build_page_config(raw: Dict[str, Any]) -> PageConfig:
    """
    Build PageConfig from the ``"page"`` sub-dict.
    """
    page_raw = raw.get("page")
    if not isinstance(page_raw, dict):
        raise ValueError("Config must include a 'page' object")

    settings_id = str(page_raw.get("settings_id") or "").strip()
    if not settings_id:
        raise ValueError("page.settings_id is required")

    position = page_raw.get("position")
    if position is not None and not isinstance(position, (int, float)):
        try:
            position = int(position)
        except (TypeError, ValueError):
            raise ValueError(f"page.position must be a number, got '{position}'") from None

    page = PageConfig(
        settings_id=settings_id,
        page_title=str(page_raw.get("page_title") or ""),
        menu_title=str(page_raw.get("menu_title") or ""),
        position=position,
        icon_url=str(page_raw.get("icon_url") or ""),
        capability=str(page_raw.get("capability") or DEFAULT_CAPABILITY),
        location=str(page_raw.get("location") or DEFAULT_LOCATION),
    )
    return page


def build_host_config(raw: Dict[str, Any]) -> HostConfig:
    """
    Build HostConfig from the ``"host"`` sub-dict.
    """
    host_raw = raw.get("host") or {}
    capabilities = host_raw.get("capabilities")
    if capabilities is None:
        capabilities = [DEFAULT_CAPABILITY]
    elif not isinstance(capabilities, list):
        raise ValueError("host.capabilities must be a list")

    return HostConfig(
        locale=str(host_raw.get("locale") or DEFAULT_LOCALE),
        options_file=host_raw.get("options_file"),
        stylesheet_directory=host_raw.get("stylesheet_directory"),
        stylesheet_directory_uri=str(host_raw.get("stylesheet_directory_uri") or ""),
        plugin_directory=host_raw.get("plugin_directory"),
        plugin_url=str(host_raw.get("plugin_url") or ""),
        capabilities=capabilities,
    )


def build_multilingual_config(raw: Dict[str, Any]) -> Optional[MultilingualConfig]:
    """
    Build MultilingualConfig from the ``"multilingual"`` sub-dict.

    Returns None when the section is absent, meaning no multilingual
    plugin is installed.
    """
    multilingual_raw = raw.get("multilingual")
    if multilingual_raw is None:
        return None
    if not isinstance(multilingual_raw, dict):
        raise ValueError("Config 'multilingual' must be an object")

    languages = multilingual_raw.get("languages") or []
    if not isinstance(languages, list):
        raise ValueError("multilingual.languages must be a list")
    return MultilingualConfig(
        languages=languages,
        flags_dir=multilingual_raw.get("flags_dir"),
    )


def build_config_from_raw(raw: Dict[str, Any], path: Path | str) -> AdminPageConfig:
    """
    Build and validate AdminPageConfig from raw configuration data.
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()
    config = AdminPageConfig(
        page=build_page_config(raw),
        fields=build_fields_config(raw),
        host=build_host_config(raw),
        multilingual=build_multilingual_config(raw),
        config_path=path,
    )
    config.validate()
    logger.debug(
        "Loaded page '%s' with %d field(s) from %s",
        config.page.settings_id,
        len(config.fields),
        path,
    )
    return config


def load_config_from_file(path: Path | str) -> AdminPageConfig:
    """
    Load and validate admin page configuration from file.

    This is the main entry point for loading configuration.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated AdminPageConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If configuration is invalid

    Example:
        >>> config = load_config_from_file("theme_options.yaml")
        >>> print(config.page.settings_id)
        theme_options
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()

    raw = load_raw_config(path)
    return build_config_from_raw(raw, path)


def save_config_to_file(config: AdminPageConfig, path: Path | str) -> None:
    """
    Serialize and save configuration to JSON/YAML file.

    Args:
        config: AdminPageConfig instance to save
        path: Destination config file path
    """
    if isinstance(path, str):
        path = Path(path)

    path = path.expanduser().resolve()
    raw = config_to_raw(config)

    suffix = path.suffix.lower()
    if suffix == ".json":
        path.write_text(json.dumps(raw, indent=2), encoding="utf-8")
    elif suffix in {".yaml", ".yml"}:
        path.write_text(yaml.safe_dump(raw, sort_keys=False), encoding="utf-8")
    else:
        raise ValueError(
            f"Unsupported config format: {suffix}. "
            f"Use .json, .yaml, or .yml"
        )


def _path_text(value: Optional[Path]) -> Optional[str]:
    return None if value is None else str(value)


def config_to_raw(config: AdminPageConfig) -> Dict[str, Any]:
    """
    Convert AdminPageConfig back to a raw dictionary suitable for saving.
    """
    page = config.page
    raw: Dict[str, Any] = {
        "page": {
            "settings_id": page.settings_id,
            "page_title": page.page_title,
            "menu_title": page.menu_title,
            "position": page.position,
            "icon_url": page.icon_url,
            "capability": page.capability,
            "location": page.location,
        },
        "fields": {},
        "host": {
            "locale": config.host.locale,
            "options_file": _path_text(config.host.options_file),
            "stylesheet_directory": _path_text(config.host.stylesheet_directory),
            "stylesheet_directory_uri": config.host.stylesheet_directory_uri,
            "plugin_directory": _path_text(config.host.plugin_directory),
            "plugin_url": config.host.plugin_url,
            "capabilities": list(config.host.capabilities),
        },
    }

    for name, field_config in config.fields.items():
        args = field_config.to_args()
        args.pop("name", None)
        if not args.get("multiple"):
            args.pop("multiple", None)
        if not args.get("use_key"):
            args.pop("use_key", None)
        if not args.get("multilang"):
            args.pop("multilang", None)
        raw["fields"][name] = args

    if config.multilingual is not None:
        raw["multilingual"] = {
            "languages": list(config.multilingual.languages),
            "flags_dir": _path_text(config.multilingual.flags_dir),
        }

    return raw
