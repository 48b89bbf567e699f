from __future__ import annotations

from pathlib import Path

from adminpage.config.models import MultilingualConfig
from adminpage.host.multilang import MultilingualPlugin


def test_language_codes_use_underscores() -> None:
    plugin = MultilingualPlugin(languages=["en-US", "de-DE", "it"])
    assert plugin.language_codes() == ["en_US", "de_DE", "it"]


def test_active_languages_records() -> None:
    plugin = MultilingualPlugin(languages=["pt-BR"])
    assert plugin.get_active_languages() == [{"code": "pt", "tag": "pt-BR"}]


def test_from_config(tmp_path: Path) -> None:
    config = MultilingualConfig(languages=["en-US"], flags_dir=str(tmp_path))
    plugin = MultilingualPlugin.from_config(config)
    assert plugin.languages == ["en-US"]
    assert plugin.flags_dir == tmp_path
