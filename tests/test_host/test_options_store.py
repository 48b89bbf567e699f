from __future__ import annotations

import json
from pathlib import Path

import pytest

from adminpage.host.options import JsonOptionStore, OptionStore


def test_option_store_copies_values() -> None:
    store = OptionStore()
    value = {"title": {"en_US": "Hello"}}
    store.set("opts", value)
    value["title"]["en_US"] = "changed"

    loaded = store.get("opts")
    assert loaded == {"title": {"en_US": "Hello"}}
    loaded["title"]["en_US"] = "changed again"
    assert store.get("opts") == {"title": {"en_US": "Hello"}}


def test_option_store_get_default_and_delete() -> None:
    store = OptionStore({"a": None})
    assert store.get("missing", "fallback") == "fallback"
    assert store.delete("a") is True
    assert store.delete("a") is False
    assert store.names() == []


def test_json_option_store_persists(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "options.json"
    store = JsonOptionStore(path)
    store.set("opts", {"title": {"en_US": "Hello"}})

    assert json.loads(path.read_text(encoding="utf-8")) == {"opts": {"title": {"en_US": "Hello"}}}
    assert JsonOptionStore(path).get("opts") == {"title": {"en_US": "Hello"}}

    store.delete("opts")
    assert JsonOptionStore(path).names() == []


def test_json_option_store_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    path.write_text("", encoding="utf-8")
    assert JsonOptionStore(path).names() == []


def test_json_option_store_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        JsonOptionStore(path)
