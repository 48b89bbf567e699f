from pathlib import Path

import pytest

from adminpage.config.loader import (
    build_config_from_raw,
    build_field_config,
    build_fields_config,
    build_host_config,
    build_multilingual_config,
    build_page_config,
    config_to_raw,
    load_config_from_file,
    load_raw_config,
    parse_config_text,
    save_config_to_file,
)


def test_parse_config_text_json() -> None:
    parsed = parse_config_text('{"a": 1}', "adminpage.json")
    assert parsed["a"] == 1


def test_parse_config_text_yaml() -> None:
    parsed = parse_config_text("a: 1\nb: 2\n", "adminpage.yaml")
    assert parsed == {"a": 1, "b": 2}


def test_parse_config_text_empty_yaml() -> None:
    assert parse_config_text("", "adminpage.yml") == {}


def test_parse_config_text_unsupported_suffix() -> None:
    with pytest.raises(ValueError, match="Unsupported config format"):
        parse_config_text("a = 1", "adminpage.toml")


def test_parse_config_text_rejects_non_object_root() -> None:
    with pytest.raises(ValueError, match="Config root must be an object"):
        parse_config_text("- a\n- b\n", "adminpage.yaml")


def test_load_raw_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_raw_config(tmp_path / "missing.yaml")


def test_build_field_config_keeps_unknown_keys() -> None:
    cfg = build_field_config({"title": "Title", "placeholder": "Type here"}, name="title")
    assert cfg.name == "title"
    assert cfg.extra == {"placeholder": "Type here"}


def test_build_field_config_rejects_unknown_type() -> None:
    with pytest.raises(ValueError):
        build_field_config({"type": "radio"}, name="choice")


def test_build_fields_config_from_list_later_wins() -> None:
    fields = build_fields_config(
        {
            "fields": [
                {"name": "title", "title": "First"},
                {"name": "footer", "title": "Footer"},
                {"name": "title", "title": "Second"},
            ]
        }
    )
    assert list(fields) == ["title", "footer"]
    assert fields["title"].title == "Second"


def test_build_fields_config_rejects_scalar() -> None:
    with pytest.raises(ValueError, match="'fields'"):
        build_fields_config({"fields": "title"})


def test_build_page_config_requires_page() -> None:
    with pytest.raises(ValueError, match="'page'"):
        build_page_config({})
    with pytest.raises(ValueError, match="settings_id"):
        build_page_config({"page": {"page_title": "Opts"}})


def test_build_page_config_coerces_position() -> None:
    page = build_page_config(
        {"page": {"settings_id": "opts", "page_title": "Opts", "menu_title": "Opts", "position": "25"}}
    )
    assert page.position == 25
    with pytest.raises(ValueError, match="position"):
        build_page_config(
            {"page": {"settings_id": "opts", "page_title": "Opts", "menu_title": "Opts", "position": "top"}}
        )


def test_build_host_config_defaults() -> None:
    cfg = build_host_config({})
    assert cfg.locale == "en_US"
    assert cfg.options_file is None
    assert cfg.capabilities == ["manage_options"]


def test_build_multilingual_config_absent_means_no_plugin() -> None:
    assert build_multilingual_config({}) is None
    cfg = build_multilingual_config({"multilingual": {"languages": ["en-US", "de-DE"]}})
    assert cfg is not None
    assert cfg.languages == ["en-US", "de-DE"]


def test_build_config_from_raw_validates(tmp_path: Path, sample_config_dict: dict) -> None:
    sample_config_dict["page"]["location"] = "sidebar"
    with pytest.raises(ValueError, match="page.location"):
        build_config_from_raw(sample_config_dict, tmp_path / "adminpage.json")


def test_load_config_from_file(sample_config_file: Path) -> None:
    config = load_config_from_file(sample_config_file)
    assert config.page.settings_id == "theme_options"
    assert config.page.menu_title == "Theme"
    assert list(config.fields) == ["footer_text", "layout", "show_search"]
    assert config.fields["show_search"].type == "checkbox"
    assert config.config_path == sample_config_file.resolve()


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "adminpage.yaml"
    path.write_text(
        "page:\n"
        "  settings_id: opts\n"
        "  page_title: Options\n"
        "  menu_title: Options\n"
        "  location: options\n"
        "fields:\n"
        "  tagline:\n"
        "    title: Tagline\n"
        "    multilang: true\n"
        "    default:\n"
        "      en_US: Hello\n"
        "multilingual:\n"
        "  languages: [en-US, de-DE]\n"
        "  flags_dir: flags\n",
        encoding="utf-8",
    )
    config = load_config_from_file(path)
    assert config.page.location == "options"
    assert config.fields["tagline"].multilang is True
    assert config.fields["tagline"].default == {"en_US": "Hello"}
    assert config.multilingual.flags_dir == (tmp_path / "flags").resolve()


@pytest.mark.parametrize("suffix", [".json", ".yaml"])
def test_save_config_round_trip(tmp_path: Path, sample_config_file: Path, suffix: str) -> None:
    config = load_config_from_file(sample_config_file)
    target = tmp_path / f"saved{suffix}"
    save_config_to_file(config, target)

    reloaded = load_config_from_file(target)
    assert config_to_raw(reloaded) == config_to_raw(config)


def test_save_config_unsupported_suffix(tmp_path: Path, sample_config_file: Path) -> None:
    config = load_config_from_file(sample_config_file)
    with pytest.raises(ValueError, match="Unsupported config format"):
        save_config_to_file(config, tmp_path / "saved.ini")


def test_config_to_raw_omits_false_flags(sample_config_file: Path) -> None:
    raw = config_to_raw(load_config_from_file(sample_config_file))
    assert "multilang" not in raw["fields"]["footer_text"]
    assert raw["fields"]["layout"]["options"] == {"wide": "Wide", "boxed": "Boxed"}
    assert "multilingual" not in raw
