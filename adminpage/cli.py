"""
Command implementations for the ``adminpage`` CLI.

Each command boots an in-memory host from the page configuration, so the
page can be rendered and submitted exactly as a real host would drive it.
"""

from __future__ import annotations

import argparse
import json
from typing import List, Tuple

from adminpage.config.models import AdminPageConfig
from adminpage.host import InMemoryHost
from adminpage.logging import get_logger
from adminpage.page import AdminPage

logger = get_logger(__name__)


def build_page(config: AdminPageConfig, assets_url: str | None = None) -> Tuple[InMemoryHost, AdminPage]:
    """Create the reference host and the configured page, and boot the host."""
    host = InMemoryHost.from_config(config.host, config.multilingual)
    page = AdminPage.from_config(host, config, assets_url=assets_url)
    host.boot()
    return host, page


def run_render(args: argparse.Namespace, config: AdminPageConfig) -> int:
    host, page = build_page(config, getattr(args, "assets_url", None))
    print(host.load_page(page.menu_slug))
    return 0


def run_field(args: argparse.Namespace, config: AdminPageConfig) -> int:
    host, page = build_page(config, getattr(args, "assets_url", None))
    if args.name not in page.fields:
        print(f"Unknown field: {args.name}")
        print(f"Available fields: {', '.join(page.fields) or '(none)'}")
        return 1
    # The section callback registers the field rows.
    page.section_config()
    settings_field = host.fields[page.menu_slug][page.settings_id][args.name]
    print(settings_field.callback(settings_field.args))
    return 0


def run_options(args: argparse.Namespace, config: AdminPageConfig) -> int:
    host, page = build_page(config)
    values = AdminPage.get_option(host, page.settings_id, args.language)
    print(json.dumps(values, indent=2, ensure_ascii=False))
    return 0


def parse_assignments(assignments: List[str]) -> List[Tuple[str, str]]:
    """
    Parse ``name=value`` command arguments into form pairs.

    Raises:
        ValueError: If an assignment has no ``=``.
    """
    pairs: List[Tuple[str, str]] = []
    for item in assignments:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected name=value, got '{item}'")
        pairs.append((name, value))
    return pairs


def run_submit(args: argparse.Namespace, config: AdminPageConfig) -> int:
    """
    Post form values to the page.

    Field names may be given in full form (``opts[title][en_US]``) or as
    ``title`` / ``title.de_DE``, which are expanded against the page's
    settings identifier and the site locale.
    """
    host, page = build_page(config)
    locale = host.get_locale()

    pairs: List[Tuple[str, str]] = []
    for name, value in parse_assignments(args.assignments):
        if "[" not in name:
            field_name, _, language = name.partition(".")
            name = f"{page.settings_id}[{field_name}][{language or locale}]"
        pairs.append((name, value))

    if args.merge:
        # Fields not posted keep their stored values.
        existing = host.get_option(page.settings_id) or {}
        posted = {name.split("[]", 1)[0] for name, _ in pairs}
        merged: List[Tuple[str, str]] = []
        for field, by_language in existing.items():
            if not isinstance(by_language, dict):
                continue
            for language, value in by_language.items():
                name = f"{page.settings_id}[{field}][{language}]"
                if name in posted:
                    continue
                if isinstance(value, list):
                    merged.extend((f"{name}[]", item) for item in value)
                elif not isinstance(value, dict):
                    merged.append((name, value))
        pairs = merged + pairs

    saved = host.submit_options(page.settings_id, pairs)
    logger.info("Saved %d option record(s)", len(saved))
    print(json.dumps(saved.get(page.settings_id) or {}, indent=2, ensure_ascii=False))
    return 0
