"""Tree-sitter integration. Optional; gracefully degrades when not installed.

Install with: pip install toukei[treesitter]
"""

from __future__ import annotations

import logging

from toukei.languages.registry import lookup
from toukei.languages.tags import LangTag

logger = logging.getLogger(__name__)

_AVAILABLE = False
try:
    import tree_sitter_language_pack  # noqa: F401

    _AVAILABLE = True
except ImportError:
    logger.debug("tree-sitter-language-pack not installed; tree-sitter parsers disabled")


def is_available() -> bool:
    """Return True if tree-sitter-language-pack is installed."""
    return _AVAILABLE


def grammar_for(tag: LangTag) -> str | None:
    """Grammar name recorded on the tag's family, or None."""
    defn = lookup(tag)
    return defn.grammar if defn is not None else None


def get_parser(tag: LangTag):
    """Return a tree-sitter parser for ``tag``, or None when unavailable."""
    grammar = grammar_for(tag)
    if grammar is None or not _AVAILABLE:
        return None
    from tree_sitter_language_pack import get_parser as _get_parser

    try:
        return _get_parser(grammar)
    except (LookupError, ValueError) as exc:
        logger.debug("No tree-sitter grammar %r for %s: %s", grammar, tag.value, exc)
        return None
