from __future__ import annotations

import pytest

from adminpage.host.forms import parse_form_pairs, split_field_name


def test_split_field_name() -> None:
    assert split_field_name("opts") == ["opts"]
    assert split_field_name("opts[title][en_US]") == ["opts", "title", "en_US"]
    assert split_field_name("opts[tags][en_US][]") == ["opts", "tags", "en_US", ""]


@pytest.mark.parametrize("name", ["", "[a]", "opts[a", "opts]a["])
def test_split_field_name_rejects_malformed(name: str) -> None:
    with pytest.raises(ValueError):
        split_field_name(name)


def test_parse_form_pairs_nested_and_lists() -> None:
    parsed = parse_form_pairs(
        [
            ("option_page", "opts"),
            ("opts[title][en_US]", "Hello"),
            ("opts[title][de_DE]", "Hallo"),
            ("opts[tags][en_US][]", "a"),
            ("opts[tags][en_US][]", "b"),
        ]
    )
    assert parsed == {
        "option_page": "opts",
        "opts": {
            "title": {"en_US": "Hello", "de_DE": "Hallo"},
            "tags": {"en_US": ["a", "b"]},
        },
    }


def test_parse_form_pairs_later_value_wins() -> None:
    assert parse_form_pairs([("a[b]", "1"), ("a[b]", "2")]) == {"a": {"b": "2"}}


def test_parse_form_pairs_later_shape_wins() -> None:
    parsed = parse_form_pairs([("a[b]", "1"), ("a[b][c]", "2"), ("a[b][c][]", "3"), ("a[b][c][]", "4")])
    assert parsed == {"a": {"b": {"c": ["3", "4"]}}}
