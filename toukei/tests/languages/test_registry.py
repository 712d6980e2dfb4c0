"""Tests for toukei.languages.registry: totality, alias identity, build guard."""

from __future__ import annotations

import enum
import threading

import pytest

from toukei.languages import (
    FAMILIES,
    PROVISIONAL_TAGS,
    TAG_BINDINGS,
    DuplicateTagError,
    IncompleteMappingError,
    InvalidDefinitionError,
    LangDef,
    LangRegistry,
    LangTag,
    RegistryBuildError,
    RegistryState,
    aliases_of,
    is_provisional,
    lookup,
    supported_tag_names,
)
from toukei.languages import definitions as defs

# ── Totality ─────────────────────────────────────────────────


class TestTotality:
    def test_every_tag_resolves(self):
        for tag in LangTag:
            assert isinstance(lookup(tag), LangDef), f"{tag.value} has no definition"

    def test_tag_domain_size(self):
        assert len(LangTag) == 56
        assert len(FAMILIES) == 50

    def test_shipped_bindings_cover_each_tag_once(self):
        bound = [tag for tag, _ in TAG_BINDINGS]
        assert len(bound) == len(set(bound))
        assert set(bound) == set(LangTag)

    def test_every_family_is_used(self):
        used = {key for _, key in TAG_BINDINGS}
        assert used == set(FAMILIES)

    def test_fresh_registry_verifies(self):
        registry = LangRegistry()
        registry.ensure_ready()
        assert registry.state is RegistryState.READY


# ── Alias identity ───────────────────────────────────────────


class TestAliasIdentity:
    @pytest.mark.parametrize(
        "alias,base",
        [
            (LangTag.H, LangTag.C),
            (LangTag.HPP, LangTag.CPP),
            (LangTag.XHTML, LangTag.HTML),
            (LangTag.UNKNOWN, LangTag.MARKDOWN),
            (LangTag.ELIXIR, LangTag.RUBY),
            (LangTag.NIM, LangTag.PYTHON),
        ],
    )
    def test_alias_shares_definition_object(self, alias, base):
        assert lookup(alias) is lookup(base)

    def test_definitions_are_the_module_constants(self):
        assert lookup(LangTag.C) is defs.C
        assert lookup(LangTag.H) is defs.C
        assert lookup(LangTag.UNKNOWN) is defs.MARKDOWN

    def test_distinct_families_are_distinct_objects(self):
        assert lookup(LangTag.C) is not lookup(LangTag.CPP)
        assert lookup(LangTag.MARKDOWN) is not lookup(LangTag.TEXT)

    def test_aliases_of_header(self):
        assert aliases_of(LangTag.C) == (LangTag.H,)
        assert aliases_of(LangTag.H) == (LangTag.C,)

    def test_aliases_of_markdown_includes_catch_all(self):
        assert aliases_of(LangTag.MARKDOWN) == (LangTag.UNKNOWN,)

    def test_unaliased_tag_has_no_aliases(self):
        assert aliases_of(LangTag.RUST) == ()

    def test_provisional_tags(self):
        assert PROVISIONAL_TAGS == {LangTag.ELIXIR, LangTag.NIM}
        assert is_provisional(LangTag.NIM)
        assert not is_provisional(LangTag.H)


# ── Lookup behaviour ─────────────────────────────────────────


class TestLookup:
    def test_repeated_lookup_returns_same_object(self):
        first = lookup(LangTag.RUST)
        for _ in range(5):
            assert lookup(LangTag.RUST) is first

    def test_canonical_string_value_resolves(self):
        assert lookup("Cpp") is lookup(LangTag.CPP)

    @pytest.mark.parametrize("value", ["Brainfuck", 42, None, ("C",)])
    def test_value_outside_domain_is_absent(self, value):
        assert lookup(value) is None

    def test_unhashable_value_is_absent(self):
        assert lookup(["C"]) is None

    def test_unhashable_value_has_no_aliases(self):
        assert aliases_of(["C"]) == ()

    def test_mapping_is_read_only(self):
        mapping = LangRegistry().ensure_ready()
        with pytest.raises(TypeError):
            mapping[LangTag.C] = defs.TEXT  # type: ignore[index]


# ── Listing ──────────────────────────────────────────────────


class TestSupportedTagNames:
    def test_one_name_per_tag(self):
        assert len(supported_tag_names()) == len(LangTag)

    def test_declaration_order(self):
        names = supported_tag_names()
        assert names == tuple(tag.value for tag in LangTag)
        assert names[:4] == ("C", "Cpp", "H", "Hpp")
        assert names[-1] == "Unknown"

    def test_listing_needs_no_build(self):
        registry = LangRegistry()
        assert registry.supported_tag_names()[0] == "C"
        assert registry.state is RegistryState.UNINITIALIZED


# ── Build guard and failures ─────────────────────────────────


class TestBuildLifecycle:
    def test_lazy_build_on_first_lookup(self):
        registry = LangRegistry()
        assert registry.state is RegistryState.UNINITIALIZED
        registry.lookup(LangTag.GO)
        assert registry.state is RegistryState.READY
        assert registry.build_count == 1

    def test_build_runs_once(self):
        registry = LangRegistry()
        for tag in LangTag:
            registry.lookup(tag)
        registry.ensure_ready()
        assert registry.build_count == 1

    def test_missing_binding_fails_before_any_lookup(self):
        bindings = [pair for pair in TAG_BINDINGS if pair[0] is not LangTag.ZIG]
        registry = LangRegistry(bindings=bindings)

        with pytest.raises(IncompleteMappingError) as excinfo:
            registry.lookup(LangTag.C)
        assert excinfo.value.missing == (LangTag.ZIG,)
        assert "Zig" in str(excinfo.value)
        assert registry.state is RegistryState.FAILED

    def test_failed_registry_never_serves(self):
        bindings = TAG_BINDINGS[1:]
        registry = LangRegistry(bindings=bindings)
        with pytest.raises(IncompleteMappingError) as first:
            registry.ensure_ready()
        with pytest.raises(IncompleteMappingError) as second:
            registry.lookup(LangTag.RUST)
        assert second.value is first.value
        assert registry.build_count == 1

    def test_new_tag_without_binding_fails(self):
        extended = enum.StrEnum(
            "ExtendedTag",
            [(tag.name, tag.value) for tag in LangTag] + [("BRAINFUCK", "Brainfuck")],
        )
        registry = LangRegistry(tags=extended)
        with pytest.raises(IncompleteMappingError) as excinfo:
            registry.ensure_ready()
        assert extended.BRAINFUCK in excinfo.value.missing

    def test_duplicate_binding_fails(self):
        bindings = TAG_BINDINGS + ((LangTag.C, "cpp"),)
        registry = LangRegistry(bindings=bindings)
        with pytest.raises(DuplicateTagError) as excinfo:
            registry.ensure_ready()
        assert excinfo.value.duplicates == (LangTag.C,)
        assert registry.state is RegistryState.FAILED

    def test_undefined_family_fails(self):
        bindings = tuple(
            (tag, "cobol") if tag is LangTag.SQL else (tag, key)
            for tag, key in TAG_BINDINGS
        )
        registry = LangRegistry(bindings=bindings)
        with pytest.raises(IncompleteMappingError, match="cobol"):
            registry.ensure_ready()

    def test_malformed_family_fails_once(self):
        families = dict(FAMILIES)
        families["c"] = LangDef(name="C", extensions=(1,))
        registry = LangRegistry(families=families)
        with pytest.raises(InvalidDefinitionError) as first:
            registry.ensure_ready()
        assert registry.state is RegistryState.FAILED
        with pytest.raises(InvalidDefinitionError) as second:
            registry.lookup(LangTag.C)
        assert second.value is first.value
        assert registry.build_count == 1

    def test_unexpected_build_error_is_wrapped_and_sticks(self):
        bindings = TAG_BINDINGS + ((LangTag.C,),)
        registry = LangRegistry(bindings=bindings)
        with pytest.raises(RegistryBuildError) as first:
            registry.ensure_ready()
        assert isinstance(first.value.__cause__, ValueError)
        assert registry.state is RegistryState.FAILED
        with pytest.raises(RegistryBuildError) as second:
            registry.ensure_ready()
        assert second.value is first.value
        assert registry.build_count == 1

    def test_build_count_is_read_only(self):
        registry = LangRegistry()
        with pytest.raises(AttributeError):
            registry.build_count = 5  # type: ignore[misc]

    def test_concurrent_first_callers_build_once(self):
        registry = LangRegistry()
        barrier = threading.Barrier(16)
        results = []
        lock = threading.Lock()

        def worker():
            barrier.wait()
            mapping = registry.ensure_ready()
            with lock:
                results.append(mapping)

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert registry.build_count == 1
        assert len(results) == 16
        assert all(m is results[0] for m in results)
