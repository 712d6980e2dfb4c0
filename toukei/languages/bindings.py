"""Tag → family bindings: single source of truth for the registry.

Exactly one pair per LangTag member. Adding a tag to tags.py means adding
one pair here; the registry refuses to build until every tag is bound.
"""

from __future__ import annotations

from toukei.languages.tags import LangTag

TAG_BINDINGS: tuple[tuple[LangTag, str], ...] = (
    (LangTag.C, "c"),
    (LangTag.CPP, "cpp"),
    (LangTag.H, "c"),  # headers share their base language's rules
    (LangTag.HPP, "cpp"),
    (LangTag.RUST, "rust"),
    (LangTag.GO, "go"),
    (LangTag.JAVA, "java"),
    (LangTag.CSHARP, "csharp"),
    (LangTag.PYTHON, "python"),
    (LangTag.PHP, "php"),
    (LangTag.SWIFT, "swift"),
    (LangTag.KOTLIN, "kotlin"),
    (LangTag.DART, "dart"),
    (LangTag.SHELL, "shell"),
    (LangTag.PERL, "perl"),
    (LangTag.RUBY, "ruby"),
    (LangTag.LUA, "lua"),
    (LangTag.SQL, "sql"),
    (LangTag.JAVASCRIPT, "javascript"),
    (LangTag.TYPESCRIPT, "typescript"),
    (LangTag.HTML, "html"),
    (LangTag.XHTML, "html"),
    (LangTag.CSS, "css"),
    (LangTag.JSON, "json"),
    (LangTag.XML, "xml"),
    (LangTag.YAML, "yaml"),
    (LangTag.TOML, "toml"),
    (LangTag.MARKDOWN, "markdown"),
    (LangTag.TEXT, "text"),
    (LangTag.ASCIIDOC, "asciidoc"),
    (LangTag.ASTRO, "astro"),
    (LangTag.CLOJURE, "clojure"),
    (LangTag.D, "d"),
    (LangTag.ELIXIR, "ruby"),  # provisional
    (LangTag.ELM, "elm"),
    (LangTag.ERLANG, "erlang"),
    (LangTag.FSHARP, "fsharp"),
    (LangTag.GRAPHQL, "graphql"),
    (LangTag.HASKELL, "haskell"),
    (LangTag.JSONNET, "jsonnet"),
    (LangTag.JULIA, "julia"),
    (LangTag.NIM, "python"),  # provisional
    (LangTag.NIX, "nix"),
    (LangTag.OCAML, "ocaml"),
    (LangTag.QCL, "qcl"),
    (LangTag.QSHARP, "qsharp"),
    (LangTag.R, "r"),
    (LangTag.REGEX, "regex"),
    (LangTag.SASS, "sass"),
    (LangTag.SCALA, "scala"),
    (LangTag.TCL, "tcl"),
    (LangTag.TEX, "tex"),
    (LangTag.V, "v"),
    (LangTag.WENYAN, "wenyan"),
    (LangTag.ZIG, "zig"),
    (LangTag.UNKNOWN, "markdown"),  # unrecognized files count as prose
)

# Tags borrowing a dissimilar family's rules until they get a definition of their own.
PROVISIONAL_TAGS: frozenset[LangTag] = frozenset({LangTag.ELIXIR, LangTag.NIM})
