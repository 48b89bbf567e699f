"""
Host platform contracts and the in-memory reference host.
"""

from .base import Host
from .forms import parse_form_pairs, split_field_name
from .memory import AdminMenuPage, InMemoryHost, SettingsField, SettingsSection
from .multilang import MultilingualPlugin
from .options import JsonOptionStore, OptionStore

__all__ = [
    "AdminMenuPage",
    "Host",
    "InMemoryHost",
    "JsonOptionStore",
    "MultilingualPlugin",
    "OptionStore",
    "SettingsField",
    "SettingsSection",
    "parse_form_pairs",
    "split_field_name",
]
