"""Turn the declarative tag bindings into the tag → definition mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from toukei.languages.definitions import LangDef
from toukei.languages.errors import DuplicateTagError, IncompleteMappingError
from toukei.languages.tags import LangTag

logger = logging.getLogger(__name__)


def build_mapping(
    bindings: Iterable[tuple[LangTag, str]],
    families: Mapping[str, LangDef],
) -> MappingProxyType[LangTag, LangDef]:
    """Resolve each (tag, family_key) pair to the family's shared LangDef.

    Aliased tags receive the very object stored in ``families``. Duplicate
    tags and unknown family keys are collected and raised together; duplicates
    take precedence since they make the mapping ambiguous.
    """
    mapping: dict[LangTag, LangDef] = {}
    duplicates: list[LangTag] = []
    unresolved: list[str] = []

    for tag, family_key in bindings:
        if not isinstance(tag, LangTag):
            unresolved.append(f"{tag!r} is not a LangTag")
            continue
        if tag in mapping:
            duplicates.append(tag)
            continue
        defn = families.get(family_key)
        if defn is None:
            unresolved.append(f"{tag.value} → undefined family {family_key!r}")
            continue
        mapping[tag] = defn

    if duplicates:
        raise DuplicateTagError(
            "Language tag(s) bound more than once: "
            + ", ".join(tag.value for tag in duplicates),
            duplicates=duplicates,
        )
    if unresolved:
        raise IncompleteMappingError(
            "Unresolvable language binding(s):\n"
            + "\n".join(f"  - {entry}" for entry in unresolved)
        )

    logger.debug(
        "Built language mapping: %d tags over %d families",
        len(mapping),
        len({id(defn) for defn in mapping.values()}),
    )
    return MappingProxyType(mapping)
