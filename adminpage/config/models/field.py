"""
Field descriptor model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .constants import DEFAULT_FIELD_TYPE, FIELD_TYPES


@dataclass
class FieldConfig:
    """
    Declarative description of one settings field.
    """

    name: str
    """Field key inside the options blob; unique per page."""

    title: str = ""
    """Row label shown by the host next to the field."""

    type: str = DEFAULT_FIELD_TYPE
    """One of text, hidden, textarea, select, checkbox."""

    description: Optional[str] = None
    """Help text rendered above the input. May contain markup."""

    default: Any = ""
    """Fallback value: a scalar, or a mapping of language code to value."""

    options: Optional[Any] = None
    """Select choices: a list of labels or a mapping of value to label."""

    multiple: bool = False
    """Render a select as a multi-select."""

    height: Optional[str] = None
    """CSS height of a multi-select."""

    use_key: bool = False
    """Use list positions instead of labels as select values."""

    multilang: bool = False
    """Render one input per active language."""

    extra: Dict[str, Any] = field(default_factory=dict)
    """Unrecognised descriptor keys, passed through to render callbacks."""

    def __post_init__(self) -> None:
        self.name = str(self.name or "").strip()
        self.title = "" if self.title is None else str(self.title)
        self.type = str(self.type or DEFAULT_FIELD_TYPE).strip().lower()
        self.multiple = bool(self.multiple)
        self.use_key = bool(self.use_key)
        self.multilang = bool(self.multilang)
        if self.default is None:
            self.default = ""

    def validate(self) -> None:
        """Validate the descriptor.

        Raises:
            ValueError: If the name is empty or the type is unknown.
        """
        if not self.name:
            raise ValueError("fields[].name is required")
        if self.type not in FIELD_TYPES:
            raise ValueError(
                f"fields.{self.name}.type must be one of {FIELD_TYPES}, got '{self.type}'"
            )

    def to_args(self) -> Dict[str, Any]:
        """Return the descriptor as the argument mapping handed to render callbacks."""
        args: Dict[str, Any] = dict(self.extra)
        args.update(
            {
                "name": self.name,
                "title": self.title,
                "type": self.type,
                "default": self.default,
                "multiple": self.multiple,
                "use_key": self.use_key,
                "multilang": self.multilang,
            }
        )
        if self.description is not None:
            args["description"] = self.description
        if self.options is not None:
            args["options"] = self.options
        if self.height is not None:
            args["height"] = self.height
        return args
