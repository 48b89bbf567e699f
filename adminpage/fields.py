"""
HTML rendering for declarative settings fields.

Every function here is pure: it takes a field descriptor and a stored value
and returns markup. Host access (options, locale, plugins) stays in
``adminpage.page``.
"""

from __future__ import annotations

import re
from html import escape
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from adminpage.config.models.constants import DEFAULT_MULTISELECT_HEIGHT
from adminpage.errors import InvalidFieldError
from adminpage.paths import flag_url

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_empty(value: Any) -> bool:
    """
    Return True for values the host treats as empty.

    Empty means None, False, "", "0", numeric zero, or an empty collection.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == "" or value == "0"
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def is_truthy(value: Any) -> bool:
    return not is_empty(value)


def is_numeric(value: Any) -> bool:
    """Return True for numbers and numeric strings such as '3' or '1.5'."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_RE.match(value))
    return False


def as_text(value: Any) -> str:
    """Convert a stored scalar to the text the host would print."""
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def resolve_default(default: Any, language: str) -> Any:
    """
    Pick the default for one language.

    A per-language mapping yields its entry for ``language``, or "" when the
    language has no entry. Any other default applies to every language.
    """
    if isinstance(default, Mapping):
        return default.get(language, "")
    if default is None:
        return ""
    return default


def resolve_value(stored: Any, default: Any, field_type: str) -> Any:
    """
    Merge a stored value with the field default.

    A missing value reads as "" (False for checkboxes). The default replaces
    it only when the value is not a boolean and is empty, so an unchecked
    checkbox never picks up a checked default.
    """
    value = stored
    if value is None:
        value = False if field_type == "checkbox" else ""
    if not isinstance(value, bool) and is_empty(value):
        value = default
    return value


def render_input(field_type: str, name: str, value: Any, css_class: str, element_id: str) -> str:
    """Render a single-line input; ``field_type`` is 'text' or 'hidden'."""
    return (
        f'<input type="{escape(field_type)}" name="{escape(name)}" '
        f'value="{escape(as_text(value))}" class="{escape(css_class)}" '
        f'id="{escape(element_id)}" cols="50">'
    )


def render_textarea(name: str, value: Any, css_class: str, element_id: str) -> str:
    return (
        f'<textarea name="{escape(name)}" class="{escape(css_class)}" '
        f'id="{escape(element_id)}" cols="50" rows="10">{escape(as_text(value))}</textarea>'
    )


def iter_select_options(options: Any, use_key: bool = False) -> Iterator[Tuple[Any, Any]]:
    """
    Yield ``(value, label)`` pairs for a select descriptor's options.

    Lists use each label as its own value. Mappings use their keys, except
    numeric keys, which also fall back to the label unless ``use_key`` is set.
    """
    if isinstance(options, Mapping):
        items: Iterable[Tuple[Any, Any]] = options.items()
    elif isinstance(options, (list, tuple)):
        items = enumerate(options)
    else:
        raise InvalidFieldError("Select field options must be a list or a mapping.")

    for key, label in items:
        if is_numeric(key) and not use_key:
            key = label
        yield key, label


def is_selected(key: Any, value: Any) -> bool:
    """Return True when ``key`` equals the stored value or is one of its entries."""
    if isinstance(value, Mapping):
        return as_text(key) in {as_text(item) for item in value.values()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return as_text(key) in {as_text(item) for item in value}
    return as_text(key) == as_text(value)


def render_select(
    name: str,
    value: Any,
    css_class: str,
    element_id: str,
    field: Mapping[str, Any],
) -> str:
    """
    Render a select box.

    Multi-selects post as a list: the name gains ``[]`` and the box gets a
    fixed height (``field['height']``, 85px when the key is absent).

    Raises:
        InvalidFieldError: If the descriptor has no ``options``.
    """
    is_multiple = bool(field.get("multiple"))
    if is_multiple:
        name = f"{name}[]"
    multiple = ' multiple="multiple"' if is_multiple else ""

    height = ""
    if is_multiple:
        box_height = field.get("height")
        if box_height is None:
            box_height = DEFAULT_MULTISELECT_HEIGHT
        height = f"height:{box_height};"

    if field.get("options") is None:
        raise InvalidFieldError('Select fields must have an "options" property.')

    rendered_options = []
    for key, label in iter_select_options(field["options"], bool(field.get("use_key"))):
        selected = 'selected="selected"' if is_selected(key, value) else ""
        rendered_options.append(
            f'<option value="{escape(as_text(key))}" {selected}>{escape(as_text(label))}</option>'
        )

    return (
        f'<select name="{escape(name)}" class="{escape(css_class)}" id="{escape(element_id)}" '
        f'{multiple} style="{escape(height)}">{"".join(rendered_options)}</select>'
    )


def render_checkbox(name: str, value: Any, css_class: str, element_id: str) -> str:
    checked = 'checked="checked"' if is_truthy(value) else ""
    return (
        f'<input type="checkbox" name="{escape(name)}" class="{escape(css_class)}" '
        f'id="{escape(element_id)}" {checked}>'
    )


def render_field(
    language: str,
    locale: str,
    field_type: str,
    name: str,
    value: Any,
    css_class: str,
    element_id: str,
    field: Mapping[str, Any],
) -> str:
    """
    Render one language's input wrapped in its toggle span.

    Spans for languages other than the site locale carry the ``hidden``
    class; the page script reveals them. Unknown types render an empty span.
    """
    hidden = "" if language == locale else "hidden"
    markup = f'<span class="magic-admin-page-field magic-admin-page-field-{escape(language)} {hidden}">'
    if field_type in ("text", "hidden"):
        markup += render_input(field_type, name, value, css_class, element_id)
    elif field_type == "textarea":
        markup += render_textarea(name, value, css_class, element_id)
    elif field_type == "select":
        markup += render_select(name, value, css_class, element_id, field)
    elif field_type == "checkbox":
        markup += render_checkbox(name, value, css_class, element_id)
    markup += "</span>"
    return markup


def render_language_toggles(
    languages: Sequence[str],
    flags_dir: Optional[str | Path],
    plugin_dir: Optional[str | Path] = None,
    plugin_url: str = "",
) -> str:
    """
    Render the flag buttons that switch a multilingual field between languages.

    ``languages`` are codes such as 'de_DE'; the flag file and alt text use
    the part before the underscore.
    """
    markup = '<div class="language-toggles">'
    for language in languages:
        short_code = language.split("_", 1)[0]
        src = flag_url(flags_dir, short_code, plugin_dir, plugin_url)
        markup += (
            f'<img src="{escape(src)}" alt="{escape(short_code)}" '
            f'class="magic-admin-page-language-toggle" '
            f'data-language="{escape(language)}">&nbsp;'
        )
    markup += "</div>"
    return markup
