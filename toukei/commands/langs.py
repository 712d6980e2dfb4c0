"""langs command: list supported language tags and the family each one uses."""

from __future__ import annotations

import argparse
import json
import sys

from toukei.commands import command_config
from toukei.languages import aliases_of, is_provisional, lookup, resolve_tags
from toukei.languages.tags import LangTag
from toukei.utils import colorize, print_error, print_table


def _alias_note(tag: LangTag) -> str:
    if is_provisional(tag):
        return "provisional"
    shared = aliases_of(tag)
    return "shared with " + ", ".join(t.value for t in shared) if shared else ""


def _configured_tags(config: dict) -> tuple[LangTag, ...]:
    names = config.get("types") or []
    if isinstance(names, str):
        names = [names]
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise ValueError(f"expected a list of tag names, got {names!r}")
    return resolve_tags(names)


def langs_payload(tags: tuple[LangTag, ...]) -> list[dict]:
    rows = []
    for tag in tags:
        defn = lookup(tag)
        rows.append(
            {
                "tag": tag.value,
                "family": defn.name,
                "extensions": list(defn.extensions),
                "aliases": [t.value for t in aliases_of(tag)],
                "provisional": is_provisional(tag),
            }
        )
    return rows


def cmd_langs(args: argparse.Namespace) -> None:
    """List language tags in declaration order, filtered by the `types` config key."""
    config = command_config(args)
    try:
        tags = _configured_tags(config)
    except ValueError as exc:
        print_error(f"invalid `types` config: {exc}")
        sys.exit(1)

    if getattr(args, "json", False):
        print(json.dumps(langs_payload(tags), indent=2, ensure_ascii=False))
        return

    show_aliases = bool(config.get("show_aliases", True))
    headers = ["Tag", "Family", "Extensions"] + (["Notes"] if show_aliases else [])
    rows = []
    for tag in tags:
        defn = lookup(tag)
        row = [tag.value, defn.name, " ".join(defn.extensions)]
        if show_aliases:
            row.append(_alias_note(tag))
        rows.append(row)

    print()
    print_table(headers, rows)
    print(colorize(f"\n  {len(tags)} language tag(s)\n", "dim"))
