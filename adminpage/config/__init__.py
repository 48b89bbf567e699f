"""
Configuration management for the admin page adapter.

This package provides typed configuration models and loaders.
"""

from .models import AdminPageConfig, FieldConfig, HostConfig, MultilingualConfig, PageConfig
from .loader import load_config_from_file

__all__ = [
    "AdminPageConfig",
    "FieldConfig",
    "HostConfig",
    "MultilingualConfig",
    "PageConfig",
    "load_config_from_file",
]
