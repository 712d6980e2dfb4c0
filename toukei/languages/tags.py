"""Language tags: the closed set of file categories the counter recognizes.

Member values are the canonical tag names used by the CLI and in reports.
Declaration order is the display order.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable


class LangTag(enum.StrEnum):
    C = "C"
    CPP = "Cpp"
    H = "H"
    HPP = "Hpp"
    RUST = "Rust"
    GO = "Go"
    JAVA = "Java"
    CSHARP = "CSharp"
    PYTHON = "Python"
    PHP = "Php"
    SWIFT = "Swift"
    KOTLIN = "Kotlin"
    DART = "Dart"
    SHELL = "Shell"
    PERL = "Perl"
    RUBY = "Ruby"
    LUA = "Lua"
    SQL = "Sql"
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"
    HTML = "Html"
    XHTML = "Xhtml"
    CSS = "Css"
    JSON = "Json"
    XML = "Xml"
    YAML = "Yaml"
    TOML = "Toml"
    MARKDOWN = "Markdown"
    TEXT = "Text"
    ASCIIDOC = "AsciiDoc"
    ASTRO = "Astro"
    CLOJURE = "Clojure"
    D = "D"
    ELIXIR = "Elixir"
    ELM = "Elm"
    ERLANG = "Erlang"
    FSHARP = "FSharp"
    GRAPHQL = "GraphQL"
    HASKELL = "Haskell"
    JSONNET = "Jsonnet"
    JULIA = "Julia"
    NIM = "Nim"
    NIX = "Nix"
    OCAML = "OCaml"
    QCL = "Qcl"
    QSHARP = "QSharp"
    R = "R"
    REGEX = "Regex"
    SASS = "Sass"
    SCALA = "Scala"
    TCL = "Tcl"
    TEX = "Tex"
    V = "V"
    WENYAN = "Wenyan"
    ZIG = "Zig"
    UNKNOWN = "Unknown"


def parse_tag(name: str) -> LangTag:
    """Resolve a user-supplied name to a tag (case-insensitive).

    Accepts either the canonical value ("CSharp") or the member name
    ("CSHARP"). Raises ValueError listing the available names.
    """
    needle = name.strip().lower()
    for tag in LangTag:
        if needle in (tag.value.lower(), tag.name.lower()):
            return tag
    available = ", ".join(tag.value for tag in LangTag)
    raise ValueError(f"Unknown language tag: {name!r}. Available: {available}")


def resolve_tags(names: Iterable[str]) -> tuple[LangTag, ...]:
    """Map user names to tags in declaration order; empty input means all tags."""
    wanted = {parse_tag(name) for name in names}
    if not wanted:
        return tuple(LangTag)
    return tuple(tag for tag in LangTag if tag in wanted)
