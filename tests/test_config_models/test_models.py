import os
from pathlib import Path

import pytest

from adminpage.config.models import (
    AdminPageConfig,
    FieldConfig,
    HostConfig,
    MultilingualConfig,
    PageConfig,
)


def test_field_config_defaults() -> None:
    cfg = FieldConfig(name=" title ")
    assert cfg.name == "title"
    assert cfg.type == "text"
    assert cfg.default == ""
    assert cfg.multilang is False
    cfg.validate()


def test_field_config_rejects_unknown_type() -> None:
    cfg = FieldConfig(name="color", type="color")
    with pytest.raises(ValueError, match="fields.color.type"):
        cfg.validate()


def test_field_config_requires_name() -> None:
    with pytest.raises(ValueError, match="name is required"):
        FieldConfig(name="").validate()


def test_field_config_to_args_includes_extra_and_optional_keys() -> None:
    cfg = FieldConfig(
        name="layout",
        title="Layout",
        type="select",
        options=["a", "b"],
        multiple=True,
        height="120px",
        extra={"placeholder": "Pick one"},
    )
    args = cfg.to_args()
    assert args["options"] == ["a", "b"]
    assert args["height"] == "120px"
    assert args["multiple"] is True
    assert args["placeholder"] == "Pick one"
    assert "description" not in args


def test_page_config_menu_slug_and_defaults() -> None:
    cfg = PageConfig(settings_id="opts", page_title="Opts", menu_title="Opts")
    assert cfg.menu_slug == "opts"
    assert cfg.capability == "manage_options"
    assert cfg.location == "menu"
    cfg.validate()


def test_page_config_validate_location() -> None:
    cfg = PageConfig(settings_id="opts", page_title="Opts", menu_title="Opts", location="sidebar")
    with pytest.raises(ValueError, match="page.location"):
        cfg.validate()


def test_host_config_env_overrides() -> None:
    os.environ["ADMINPAGE_LOCALE"] = "de_DE"
    os.environ["ADMINPAGE_OPTIONS_FILE"] = "/tmp/adminpage-options.json"
    cfg = HostConfig()
    assert cfg.locale == "de_DE"
    assert cfg.options_file == Path("/tmp/adminpage-options.json")


def test_host_config_explicit_options_file_wins() -> None:
    os.environ["ADMINPAGE_OPTIONS_FILE"] = "/tmp/env.json"
    cfg = HostConfig(options_file="/tmp/explicit.json")
    assert cfg.options_file == Path("/tmp/explicit.json")


def test_host_config_validate_locale() -> None:
    with pytest.raises(ValueError, match="underscores"):
        HostConfig(locale="en-US").validate()


def test_multilingual_config_validate() -> None:
    MultilingualConfig(languages=["en-US"]).validate()
    with pytest.raises(ValueError, match="non-empty"):
        MultilingualConfig(languages=[]).validate()
    with pytest.raises(ValueError, match="Duplicate"):
        MultilingualConfig(languages=["en-US", "en-US"]).validate()


def test_admin_page_config_resolves_relative_paths(tmp_path: Path) -> None:
    cfg = AdminPageConfig(
        page=PageConfig(settings_id="opts", page_title="Opts", menu_title="Opts"),
        host=HostConfig(options_file="data/options.json"),
        multilingual=MultilingualConfig(languages=["en-US"], flags_dir="flags"),
        config_path=tmp_path / "adminpage.yaml",
    )
    assert cfg.host.options_file == (tmp_path / "data" / "options.json").resolve()
    assert cfg.multilingual.flags_dir == (tmp_path / "flags").resolve()


def test_admin_page_config_validate_field_names() -> None:
    cfg = AdminPageConfig(
        page=PageConfig(settings_id="opts", page_title="Opts", menu_title="Opts"),
        fields={"title": FieldConfig(name="other")},
    )
    with pytest.raises(ValueError, match="different name"):
        cfg.validate()
