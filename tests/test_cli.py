from __future__ import annotations

from pathlib import Path

import pytest

from adminpage.cli import build_page, parse_assignments
from adminpage.config.loader import load_config_from_file


def test_parse_assignments() -> None:
    assert parse_assignments(["a=1", "b[c]=x=y", "d="]) == [("a", "1"), ("b[c]", "x=y"), ("d", "")]


@pytest.mark.parametrize("item", ["novalue", "=value"])
def test_parse_assignments_rejects(item: str) -> None:
    with pytest.raises(ValueError):
        parse_assignments([item])


def test_build_page_boots_host(sample_config_file: Path) -> None:
    config = load_config_from_file(sample_config_file)
    host, page = build_page(config, assets_url="https://example.test/assets")
    assert host.registered_settings == {"theme_options": ["theme_options"]}
    assert "theme_options" in host.pages
    assert page.component_url() == "https://example.test/assets"
