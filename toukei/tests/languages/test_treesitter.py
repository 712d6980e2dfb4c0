"""Tests for the optional tree-sitter parser lookup."""

from __future__ import annotations

from unittest.mock import patch

import pytest

import toukei.languages.treesitter as ts_mod
from toukei.languages import LangTag
from toukei.languages.treesitter import get_parser, grammar_for, is_available


class TestGrammarFor:
    def test_grammar_recorded_on_family(self):
        assert grammar_for(LangTag.RUST) == "rust"
        assert grammar_for(LangTag.SHELL) == "bash"

    def test_alias_uses_base_grammar(self):
        assert grammar_for(LangTag.HPP) == "cpp"

    def test_family_without_grammar(self):
        assert grammar_for(LangTag.WENYAN) is None
        assert get_parser(LangTag.WENYAN) is None


class TestUnavailable:
    def test_get_parser_returns_none_without_library(self):
        with patch.object(ts_mod, "_AVAILABLE", False):
            assert get_parser(LangTag.RUST) is None


@pytest.mark.skipif(not is_available(), reason="tree-sitter-language-pack not installed")
class TestWithLibrary:
    def test_parses_rust_source(self):
        parser = get_parser(LangTag.RUST)
        assert parser is not None
        tree = parser.parse(b"fn main() {}\n")
        assert tree.root_node.type == "source_file"

    def test_unknown_grammar_degrades_to_none(self):
        with patch("tree_sitter_language_pack.get_parser", side_effect=LookupError("nope")):
            assert get_parser(LangTag.RUST) is None
