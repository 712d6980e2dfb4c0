"""Language registry: tag enumeration, family definitions, and verified lookup."""

from __future__ import annotations

from toukei.languages.bindings import PROVISIONAL_TAGS, TAG_BINDINGS
from toukei.languages.builder import build_mapping
from toukei.languages.definitions import FAMILIES, LangDef
from toukei.languages.errors import (
    DuplicateTagError,
    IncompleteMappingError,
    InvalidDefinitionError,
    RegistryBuildError,
)
from toukei.languages.patterns import (
    class_regexes,
    function_regexes,
    matches_class,
    matches_function,
)
from toukei.languages.registry import (
    LangRegistry,
    RegistryState,
    aliases_of,
    default_registry,
    ensure_ready,
    is_provisional,
    lookup,
    supported_tag_names,
)
from toukei.languages.tags import LangTag, parse_tag, resolve_tags
from toukei.languages.verification import validate_definition, verify_complete

__all__ = [
    "FAMILIES",
    "PROVISIONAL_TAGS",
    "TAG_BINDINGS",
    "DuplicateTagError",
    "IncompleteMappingError",
    "InvalidDefinitionError",
    "LangDef",
    "LangRegistry",
    "LangTag",
    "RegistryBuildError",
    "RegistryState",
    "aliases_of",
    "build_mapping",
    "class_regexes",
    "default_registry",
    "ensure_ready",
    "function_regexes",
    "is_provisional",
    "lookup",
    "matches_class",
    "matches_function",
    "parse_tag",
    "resolve_tags",
    "supported_tag_names",
    "validate_definition",
    "verify_complete",
]
