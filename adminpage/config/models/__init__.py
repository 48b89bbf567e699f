"""
Configuration data models for the admin page adapter.
"""

from .constants import (
    DEFAULT_CAPABILITY,
    DEFAULT_FIELD_TYPE,
    DEFAULT_LOCALE,
    DEFAULT_LOCATION,
    DEFAULT_MULTISELECT_HEIGHT,
    FIELD_TYPES,
    PAGE_LOCATIONS,
)
from .field import FieldConfig
from .host import HostConfig, MultilingualConfig
from .page import PageConfig
from .admin_page_config import AdminPageConfig

__all__ = [
    "AdminPageConfig",
    "FieldConfig",
    "HostConfig",
    "MultilingualConfig",
    "PageConfig",
    "DEFAULT_CAPABILITY",
    "DEFAULT_FIELD_TYPE",
    "DEFAULT_LOCALE",
    "DEFAULT_LOCATION",
    "DEFAULT_MULTISELECT_HEIGHT",
    "FIELD_TYPES",
    "PAGE_LOCATIONS",
]
