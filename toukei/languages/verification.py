"""Build-time checks for the tag mapping and the definitions it points at."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from toukei.languages.definitions import LangDef
from toukei.languages.errors import IncompleteMappingError, InvalidDefinitionError
from toukei.languages.tags import LangTag


def _validate_markers(defn: LangDef) -> list[str]:
    errors: list[str] = []
    for field_name in ("line_comment", "doc_comment"):
        marker = getattr(defn, field_name)
        if marker is not None and (not isinstance(marker, str) or not marker):
            errors.append(f"{field_name} must be a non-empty string or None")
    block = defn.block_comment
    if block is not None:
        if (
            not isinstance(block, tuple)
            or len(block) != 2
            or not all(isinstance(part, str) and part for part in block)
        ):
            errors.append("block_comment must be an (open, close) pair of non-empty strings")
    return errors


def _validate_patterns(defn: LangDef) -> list[str]:
    errors: list[str] = []
    for field_name in ("function_patterns", "class_patterns"):
        patterns = getattr(defn, field_name)
        if not isinstance(patterns, tuple):
            errors.append(f"{field_name} must be a tuple")
            continue
        for idx, pattern in enumerate(patterns):
            try:
                re.compile(pattern)
            except (re.error, TypeError) as exc:
                errors.append(f"{field_name}[{idx}] does not compile: {exc}")
    return errors


def validate_definition(key: str, defn: LangDef) -> None:
    """Validate the LangDef contract so a broken family fails the build."""
    errors: list[str] = []

    if not isinstance(defn, LangDef):
        errors.append(f"family '{key}' must be a LangDef, got {type(defn).__name__}")
    else:
        if not isinstance(defn.name, str) or not defn.name.strip():
            errors.append("name must be non-empty")
        if not isinstance(defn.extensions, tuple):
            errors.append("extensions must be a tuple")
        elif not all(isinstance(ext, str) and ext for ext in defn.extensions):
            errors.append("extensions must be non-empty strings")
        elif any(ext.startswith(".") for ext in defn.extensions):
            errors.append("extensions must not include the leading dot")
        errors.extend(_validate_markers(defn))
        errors.extend(_validate_patterns(defn))

    if errors:
        raise InvalidDefinitionError(
            f"Language family '{key}' has an invalid definition:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def verify_complete(
    mapping: Mapping[LangTag, LangDef],
    tags: Iterable[LangTag] = LangTag,
) -> None:
    """Raise IncompleteMappingError unless every tag has a definition."""
    missing = [tag for tag in tags if mapping.get(tag) is None]
    if missing:
        raise IncompleteMappingError(
            f"{len(missing)} language tag(s) have no definition: "
            + ", ".join(tag.value for tag in missing),
            missing=missing,
        )
