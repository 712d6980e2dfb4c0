"""show command: print one tag's lexical definition."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys

from toukei.languages import aliases_of, is_provisional, lookup, parse_tag, treesitter
from toukei.utils import colorize, print_error


def _fmt(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, tuple) and len(value) == 2 and all(isinstance(v, str) for v in value):
        return f"{value[0]} … {value[1]}"
    return str(value)


def cmd_show(args: argparse.Namespace) -> None:
    try:
        tag = parse_tag(args.tag)
    except ValueError as exc:
        print_error(str(exc))
        sys.exit(1)

    defn = lookup(tag)
    aliases = aliases_of(tag)

    if getattr(args, "json", False):
        payload = dataclasses.asdict(defn)
        payload["tag"] = tag.value
        payload["aliases"] = [t.value for t in aliases]
        payload["provisional"] = is_provisional(tag)
        payload["parser_available"] = treesitter.get_parser(tag) is not None
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print(colorize(f"\n  {tag.value} ({defn.name})\n", "bold"))
    print(f"  {'extensions':<18} {' '.join(defn.extensions) or '-'}")
    print(f"  {'line comment':<18} {_fmt(defn.line_comment)}")
    print(f"  {'block comment':<18} {_fmt(defn.block_comment)}")
    print(f"  {'doc comment':<18} {_fmt(defn.doc_comment)}")
    grammar = _fmt(defn.grammar)
    if defn.grammar and not treesitter.is_available():
        grammar += colorize(" (tree-sitter not installed)", "dim")
    print(f"  {'grammar':<18} {grammar}")
    for label, patterns in (
        ("function patterns", defn.function_patterns),
        ("class patterns", defn.class_patterns),
    ):
        print(f"  {label:<18} {len(patterns)}")
        for pattern in patterns:
            print(colorize(f"  {'':18} {pattern}", "dim"))
    if aliases:
        print(f"  {'shared with':<18} {', '.join(t.value for t in aliases)}")
    if is_provisional(tag):
        print(colorize("  Borrows another family's rules until it gets its own.", "yellow"))
    print()
