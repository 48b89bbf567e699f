"""
Decoding of bracketed form field names into nested values.

``opts[title][en_US]=Hi`` becomes ``{"opts": {"title": {"en_US": "Hi"}}}``;
a trailing ``[]`` collects repeated values into a list.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Tuple

_NAME_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_KEY_RE = re.compile(r"\[([^\[\]]*)\]")


def split_field_name(name: str) -> List[str]:
    """
    Split ``root[a][b][]`` into ``["root", "a", "b", ""]``.

    Raises:
        ValueError: If the brackets are unbalanced or the root is missing.
    """
    match = _NAME_RE.match(name.strip())
    if not match:
        raise ValueError(f"Malformed form field name: '{name}'")
    return [match.group(1)] + _KEY_RE.findall(match.group(2))


def parse_form_pairs(pairs: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """
    Build nested dictionaries from ``(name, value)`` form pairs.

    Later pairs overwrite earlier ones for the same path, including a
    scalar that is later posted as a nested value.
    """
    result: Dict[str, Any] = {}
    for name, value in pairs:
        keys = split_field_name(name)
        container: Any = result
        for key, next_key in zip(keys, keys[1:] + [None]):
            if next_key is None:
                if key == "":
                    container.append(value)
                else:
                    container[key] = value
                break

            child: Any = [] if next_key == "" else {}
            if key == "":
                container.append(child)
            elif isinstance(container.get(key), type(child)):
                child = container[key]
            else:
                container[key] = child
            container = child
    return result
