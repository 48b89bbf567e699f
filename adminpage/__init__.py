from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "1.0.0"

_LAZY_EXPORTS = {
    "AdminPage": ("adminpage.page", "AdminPage"),
    "InMemoryHost": ("adminpage.host", "InMemoryHost"),
    "load_config_from_file": ("adminpage.config", "load_config_from_file"),
}

__all__ = ["__version__", "AdminPage", "InMemoryHost", "load_config_from_file"]


def __getattr__(name: str) -> Any:
    if name in _LAZY_EXPORTS:
        module_name, attr_name = _LAZY_EXPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'adminpage' has no attribute '{name}'")
