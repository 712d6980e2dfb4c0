"""Per-family LangDef constants.

Each constant describes the lexical conventions of one language family:
comment markers, doc-comment marker, and the line patterns the counter uses
to recognize function and class declarations. Several tags may share one
family (see bindings.py); they share the constant itself, never a copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class LangDef:
    """Lexical rules for one language family.

    Fields:
        name: human-readable family name
        extensions: file extensions without the leading dot
        line_comment: line comment marker, or None
        block_comment: (open, close) markers, or None
        doc_comment: doc comment opener, or None
        function_patterns: regexes matching a function declaration line
        class_patterns: regexes matching a class/type declaration line
        grammar: tree-sitter grammar name, or None
    """

    name: str
    extensions: tuple[str, ...]
    line_comment: str | None = None
    block_comment: tuple[str, str] | None = None
    doc_comment: str | None = None
    function_patterns: tuple[str, ...] = ()
    class_patterns: tuple[str, ...] = ()
    grammar: str | None = None


_C_STYLE = ("/*", "*/")
_ML_STYLE = ("(*", "*)")
_HASKELL_STYLE = ("{-", "-}")
_MARKUP_STYLE = ("<!--", "-->")

# ── Systems ───────────────────────────────────────────────────

C = LangDef(
    name="C",
    extensions=("c", "h"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(
        r"\w+\s+\w+\s*\([^)]*\)\s*\{",
        r"\w+\s+\*\w+\s*\([^)]*\)\s*\{",
    ),
    class_patterns=(r"typedef\s+struct\s+\w+",),
    grammar="c",
)

CPP = LangDef(
    name="C++",
    extensions=("cpp", "cxx", "cc", "c++", "hpp", "hxx", "hh", "h++"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(
        r"\w+\s+\w+\s*\([^)]*\)\s*\{",
        r"\w+\s+\*\w+\s*\([^)]*\)\s*\{",
        r"\w+\s+&\w+\s*\([^)]*\)\s*\{",
    ),
    class_patterns=(r"class\s+\w+",),
    grammar="cpp",
)

D = LangDef(
    name="D",
    extensions=("d", "di"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(
        r"\w+\s+\w+\s*\([^)]*\)\s*\{",
        r"\w+\s+\*\w+\s*\([^)]*\)\s*\{",
    ),
    class_patterns=(r"class\s+\w+",),
    grammar="d",
)

RUST = LangDef(
    name="Rust",
    extensions=("rs",),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="///",
    function_patterns=(r"fn\s+\w+", r"pub\s+fn\s+\w+", r"async\s+fn\s+\w+"),
    class_patterns=(r"struct\s+\w+", r"enum\s+\w+", r"impl\s+\w+"),
    grammar="rust",
)

GO = LangDef(
    name="Go",
    extensions=("go",),
    line_comment="//",
    block_comment=_C_STYLE,
    function_patterns=(r"func\s+\w+\s*\([^)]*\)",),
    class_patterns=(r"type\s+\w+\s+struct",),
    grammar="go",
)

ZIG = LangDef(
    name="Zig",
    extensions=("zig",),
    line_comment="//",
    function_patterns=(r"fn\s+\w+", r"pub\s+fn\s+\w+"),
    class_patterns=(r"const\s+\w+", r"var\s+\w+"),
    grammar="zig",
)

V = LangDef(
    name="V",
    extensions=("v", "vv", "vsh"),
    line_comment="//",
    block_comment=_C_STYLE,
    function_patterns=(r"fn\s+\w+", r"pub\s+fn\s+\w+"),
    class_patterns=(r"struct\s+\w+", r"enum\s+\w+", r"const\s+\w+", r"var\s+\w+"),
)

# ── JVM / .NET / mobile ───────────────────────────────────────

JAVA = LangDef(
    name="Java",
    extensions=("java", "class", "jar"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(
        r"\w+\s+\w+\s*\([^)]*\)\s*\{",
        r"public\s+\w+\s+\w+\s*\([^)]*\)\s*\{",
    ),
    class_patterns=(r"class\s+\w+", r"interface\s+\w+"),
    grammar="java",
)

KOTLIN = LangDef(
    name="Kotlin",
    extensions=("kt", "kts", "ktm"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(r"fun\s+\w+", r"val\s+\w+", r"var\s+\w+"),
    class_patterns=(r"class\s+\w+", r"interface\s+\w+", r"object\s+\w+"),
    grammar="kotlin",
)

SCALA = LangDef(
    name="Scala",
    extensions=("scala", "sc", "sbt"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(r"def\s+\w+", r"val\s+\w+", r"var\s+\w+"),
    class_patterns=(r"class\s+\w+", r"object\s+\w+", r"trait\s+\w+"),
    grammar="scala",
)

CLOJURE = LangDef(
    name="Clojure",
    extensions=("clj", "cljs", "cljc", "edn"),
    line_comment=";;",
    function_patterns=(r"\(defn\s+", r"\(def\s+", r"\(defmacro\s+"),
    class_patterns=(r"\(defrecord\s+",),
    grammar="clojure",
)

CSHARP = LangDef(
    name="C#",
    extensions=("cs",),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="///",
    function_patterns=(
        r"\w+\s+\w+\s*\([^)]*\)\s*\{",
        r"public\s+\w+\s+\w+\s*\([^)]*\)\s*\{",
    ),
    class_patterns=(r"class\s+\w+",),
    grammar="csharp",
)

FSHARP = LangDef(
    name="F#",
    extensions=("fs", "fsi", "fsx", "fsscript"),
    line_comment="//",
    block_comment=_ML_STYLE,
    doc_comment="///",
    function_patterns=(r"let\s+\w+", r"member\s+\w+\."),
    class_patterns=(r"type\s+\w+",),
    grammar="fsharp",
)

SWIFT = LangDef(
    name="Swift",
    extensions=("swift", "swiftinterface", "swiftmodule"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="///",
    function_patterns=(r"func\s+\w+", r"init\s*\(", r"deinit"),
    class_patterns=(r"class\s+\w+", r"struct\s+\w+", r"enum\s+\w+"),
    grammar="swift",
)

DART = LangDef(
    name="Dart",
    extensions=("dart",),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="///",
    function_patterns=(
        r"\w+\s+\w+\s*\([^)]*\)\s*\{",
        r"\w+\s+\w+\s*\([^)]*\)\s*async",
    ),
    class_patterns=(r"class\s+\w+",),
    grammar="dart",
)

# ── Scripting ─────────────────────────────────────────────────

PYTHON = LangDef(
    name="Python",
    extensions=("py", "pyi", "pyc", "pyd", "pyw", "pyz", "pyzw"),
    line_comment="#",
    block_comment=('"""', '"""'),
    doc_comment='"""',
    function_patterns=(r"def\s+\w+", r"class\s+\w+", r"async\s+def\s+\w+"),
    class_patterns=(r"class\s+\w+",),
    grammar="python",
)

RUBY = LangDef(
    name="Ruby",
    extensions=("rb", "rbw", "gemspec", "rake", "ru", "erb"),
    line_comment="#",
    block_comment=("=begin", "=end"),
    function_patterns=(
        r"def\s+\w+",
        r"def\s+self\.\w+",
        r"class\s+\w+",
        r"module\s+\w+",
    ),
    class_patterns=(r"class\s+\w+", r"module\s+\w+"),
    grammar="ruby",
)

PERL = LangDef(
    name="Perl",
    extensions=("pl", "pm"),
    line_comment="#",
    function_patterns=(r"sub\s+\w+",),
    class_patterns=(r"class\s+\w+",),
    grammar="perl",
)

PHP = LangDef(
    name="PHP",
    extensions=("php", "phtml", "php3", "php4", "php5", "phps", "phpt"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(r"function\s+\w+", r"\w+\s+\w+\s*\([^)]*\)\s*\{"),
    class_patterns=(r"class\s+\w+", r"interface\s+\w+"),
    grammar="php",
)

LUA = LangDef(
    name="Lua",
    extensions=("lua", "wlua"),
    line_comment="--",
    block_comment=("--[[", "]]"),
    function_patterns=(r"function\s+\w+", r"local\s+function\s+\w+"),
    grammar="lua",
)

SHELL = LangDef(
    name="Shell",
    extensions=("sh", "bash", "zsh", "ksh", "csh"),
    line_comment="#",
    function_patterns=(r"function\s+\w+", r"\w+\s*\(\s*\)"),
    grammar="bash",
)

TCL = LangDef(
    name="Tcl",
    extensions=("tcl", "tk"),
    line_comment="#",
    function_patterns=(r"proc\s+\w+",),
    grammar="tcl",
)

R = LangDef(
    name="R",
    extensions=("r", "R", "s", "Rhistory", "Rprofile", "Renviron"),
    line_comment="#",
    function_patterns=(r"\w+\s*<-\s*function", r"\w+\s*\([^)]*\)"),
    grammar="r",
)

JULIA = LangDef(
    name="Julia",
    extensions=("jl",),
    line_comment="#",
    block_comment=("#=", "=#"),
    function_patterns=(r"function\s+\w+", r"\w+\s*\([^)]*\)\s*="),
    class_patterns=(r"struct\s+\w+", r"type\s+\w+"),
    grammar="julia",
)

# ── Web ───────────────────────────────────────────────────────

JAVASCRIPT = LangDef(
    name="JavaScript",
    extensions=("js", "jsx", "mjs", "cjs"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(
        r"function\s+\w+",
        r"const\s+\w+\s*=\s*\(",
        r"\w+\s*:\s*function",
    ),
    class_patterns=(r"class\s+\w+",),
    grammar="javascript",
)

TYPESCRIPT = LangDef(
    name="TypeScript",
    extensions=("ts", "tsx", "cts", "mts"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(
        r"function\s+\w+",
        r"const\s+\w+\s*=\s*\(",
        r"\w+\s*:\s*function",
    ),
    class_patterns=(r"class\s+\w+", r"interface\s+\w+", r"type\s+\w+"),
    grammar="typescript",
)

ASTRO = LangDef(
    name="Astro",
    extensions=("astro",),
    line_comment="//",
    block_comment=_C_STYLE,
    function_patterns=("function", "const", "let", "async function"),
)

HTML = LangDef(
    name="HTML",
    extensions=("html", "htm", "xhtml"),
    block_comment=_MARKUP_STYLE,
    function_patterns=("<script", "<function"),
    class_patterns=(r'class\s*=\s*"',),
    grammar="html",
)

CSS = LangDef(
    name="CSS",
    extensions=("css",),
    block_comment=_C_STYLE,
    function_patterns=(r"@\w+\s+", r"\w+\s*\{"),
    class_patterns=(r"\.\w+",),
    grammar="css",
)

SASS = LangDef(
    name="Sass",
    extensions=("sass", "scss"),
    line_comment="//",
    block_comment=_C_STYLE,
    function_patterns=(r"@\w+\s+", r"\w+\s*\{"),
    class_patterns=(r"\.\w+", r"%\w+"),
)

GRAPHQL = LangDef(
    name="GraphQL",
    extensions=("graphql", "gql"),
    line_comment="#",
    doc_comment='"""',
    function_patterns=(r"type\s+\w+", r"interface\s+\w+", r"query\s+\w+"),
    class_patterns=(r"type\s+\w+",),
    grammar="graphql",
)

# ── Functional ────────────────────────────────────────────────

HASKELL = LangDef(
    name="Haskell",
    extensions=("hs", "lhs"),
    line_comment="--",
    block_comment=_HASKELL_STYLE,
    doc_comment="{-|",
    function_patterns=(r"\w+\s*::", r"\w+\s+\w+\s*="),
    class_patterns=(r"data\s+\w+", r"class\s+\w+"),
    grammar="haskell",
)

ELM = LangDef(
    name="Elm",
    extensions=("elm",),
    line_comment="--",
    block_comment=_HASKELL_STYLE,
    doc_comment="{-|",
    function_patterns=(r"\w+\s*:\s+", r"\w+\s+\w+\s*="),
    class_patterns=(r"type\s+\w+",),
    grammar="elm",
)

OCAML = LangDef(
    name="OCaml",
    extensions=("ml", "mli", "cmi", "cmo", "cmx"),
    block_comment=_ML_STYLE,
    doc_comment="(**",
    function_patterns=(r"let\s+\w+", r"let rec\s+\w+"),
    class_patterns=(r"type\s+\w+", r"module\s+\w+", r"class\s+\w+"),
    grammar="ocaml",
)

ERLANG = LangDef(
    name="Erlang",
    extensions=("erl", "hrl"),
    line_comment="%",
    function_patterns=(r"\w+\s*\([^)]*\)\s*->",),
    class_patterns=(r"-module\s+\w+",),
    grammar="erlang",
)

NIX = LangDef(
    name="Nix",
    extensions=("nix",),
    line_comment="#",
    block_comment=_C_STYLE,
    function_patterns=(r"\w+\s*=", r"\w+\s*:"),
    grammar="nix",
)

JSONNET = LangDef(
    name="Jsonnet",
    extensions=("jsonnet", "libsonnet"),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(r"function\s+\w+", r"local\s+\w+"),
)

# ── Quantum ───────────────────────────────────────────────────

QCL = LangDef(
    name="QCL",
    extensions=("qcl",),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(r"\w+\s+\w+\s*\([^)]*\)\s*\{", r"procedure\s+\w+"),
)

QSHARP = LangDef(
    name="Q#",
    extensions=("qs",),
    line_comment="//",
    block_comment=_C_STYLE,
    doc_comment="/**",
    function_patterns=(r"operation\s+\w+", r"function\s+\w+"),
)

WENYAN = LangDef(
    name="文言",
    extensions=("wy",),
    line_comment="註",
    block_comment=("〔", "〕"),
    function_patterns=("有",),
)

# ── Data / markup / prose ─────────────────────────────────────

SQL = LangDef(
    name="SQL",
    extensions=("sql", "ddl", "dml"),
    line_comment="--",
    block_comment=_C_STYLE,
    function_patterns=(
        r"CREATE\s+\w+",
        r"ALTER\s+\w+",
        r"DROP\s+\w+",
        r"SELECT\s+",
    ),
    class_patterns=(r"CREATE\s+TABLE\s+\w+",),
    grammar="sql",
)

JSON = LangDef(name="JSON", extensions=("json", "jsonc"), grammar="json")

XML = LangDef(
    name="XML",
    extensions=("xml", "xsl", "xslt", "svg", "wsdl", "wsdd", "xhtml"),
    block_comment=_MARKUP_STYLE,
    function_patterns=(r"<\w+", r"</\w+"),
    class_patterns=(r'<\w+\s+class\s*=\s*"',),
    grammar="xml",
)

YAML = LangDef(name="YAML", extensions=("yaml", "yml"), line_comment="#", grammar="yaml")

TOML = LangDef(name="TOML", extensions=("toml",), line_comment="#", grammar="toml")

TEX = LangDef(
    name="TeX",
    extensions=("tex", "latex", "sty", "cls", "bib"),
    line_comment="%",
    function_patterns=(r"\\\w+\s*\{",),
)

REGEX = LangDef(name="Regex", extensions=("regex",))

MARKDOWN = LangDef(
    name="Markdown",
    extensions=("md", "markdown", "mdown", "mkdn"),
    block_comment=_MARKUP_STYLE,
    grammar="markdown",
)

ASCIIDOC = LangDef(name="AsciiDoc", extensions=("adoc", "asciidoc", "asc"))

TEXT = LangDef(name="Text", extensions=("txt",))


# Family key → canonical definition object. Keys are what bindings.py refers to.
FAMILIES: MappingProxyType[str, LangDef] = MappingProxyType(
    {
        "asciidoc": ASCIIDOC,
        "astro": ASTRO,
        "c": C,
        "clojure": CLOJURE,
        "cpp": CPP,
        "csharp": CSHARP,
        "css": CSS,
        "d": D,
        "dart": DART,
        "elm": ELM,
        "erlang": ERLANG,
        "fsharp": FSHARP,
        "go": GO,
        "graphql": GRAPHQL,
        "haskell": HASKELL,
        "html": HTML,
        "java": JAVA,
        "javascript": JAVASCRIPT,
        "json": JSON,
        "jsonnet": JSONNET,
        "julia": JULIA,
        "kotlin": KOTLIN,
        "lua": LUA,
        "markdown": MARKDOWN,
        "nix": NIX,
        "ocaml": OCAML,
        "perl": PERL,
        "php": PHP,
        "python": PYTHON,
        "qcl": QCL,
        "qsharp": QSHARP,
        "r": R,
        "regex": REGEX,
        "ruby": RUBY,
        "rust": RUST,
        "sass": SASS,
        "scala": SCALA,
        "shell": SHELL,
        "sql": SQL,
        "swift": SWIFT,
        "tcl": TCL,
        "tex": TEX,
        "text": TEXT,
        "toml": TOML,
        "typescript": TYPESCRIPT,
        "v": V,
        "wenyan": WENYAN,
        "xml": XML,
        "yaml": YAML,
        "zig": ZIG,
    }
)
