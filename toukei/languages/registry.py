"""Process-wide language registry: once-only build, then lock-free lookups.

State moves UNINITIALIZED → BUILDING → READY. A failed build parks the
registry in FAILED and the same error is raised on every later access, so a
half-verified mapping is never served.
"""

from __future__ import annotations

import enum
import logging
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from toukei.languages.bindings import PROVISIONAL_TAGS, TAG_BINDINGS
from toukei.languages.builder import build_mapping
from toukei.languages.definitions import FAMILIES, LangDef
from toukei.languages.errors import RegistryBuildError
from toukei.languages.tags import LangTag
from toukei.languages.verification import validate_definition, verify_complete

logger = logging.getLogger(__name__)


class RegistryState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    BUILDING = "building"
    READY = "ready"
    FAILED = "failed"


class LangRegistry:
    """Tag → LangDef registry built from a bindings table on first use."""

    def __init__(
        self,
        bindings: Iterable[tuple[LangTag, str]] = TAG_BINDINGS,
        families: Mapping[str, LangDef] = FAMILIES,
        tags: Iterable[LangTag] = LangTag,
    ) -> None:
        self._bindings = tuple(bindings)
        self._families = families
        self._tags = tuple(tags)
        self._lock = threading.Lock()
        self._state = RegistryState.UNINITIALIZED
        self._mapping: MappingProxyType[LangTag, LangDef] | None = None
        self._error: RegistryBuildError | None = None
        self._build_count = 0

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def build_count(self) -> int:
        """Number of build attempts; never exceeds one."""
        return self._build_count

    def _build(self) -> MappingProxyType[LangTag, LangDef]:
        self._build_count += 1
        for key, defn in self._families.items():
            validate_definition(key, defn)
        mapping = build_mapping(self._bindings, self._families)
        verify_complete(mapping, self._tags)
        return mapping

    def _fail(self, error: RegistryBuildError) -> None:
        self._error = error
        self._state = RegistryState.FAILED
        logger.debug("Language registry build failed: %s", error)

    def ensure_ready(self) -> MappingProxyType[LangTag, LangDef]:
        """Build and verify the mapping if needed; raise if the build failed."""
        mapping = self._mapping
        if mapping is not None:
            return mapping
        with self._lock:
            if self._state is RegistryState.READY:
                return self._mapping
            if self._state is RegistryState.FAILED:
                raise self._error
            self._state = RegistryState.BUILDING
            logger.debug("Building language registry (%d bindings)", len(self._bindings))
            try:
                mapping = self._build()
            except RegistryBuildError as exc:
                self._fail(exc)
                raise
            except Exception as exc:
                # Malformed bindings or families outside the error taxonomy.
                error = RegistryBuildError(
                    f"Language registry build failed: {type(exc).__name__}: {exc}"
                )
                self._fail(error)
                raise error from exc
            self._mapping = mapping
            self._state = RegistryState.READY
            return mapping

    def lookup(self, tag: object) -> LangDef | None:
        """Return the definition for ``tag``, or None for values outside the tag set."""
        mapping = self.ensure_ready()
        try:
            defn = mapping.get(tag)
        except TypeError:
            defn = None
        if defn is None:
            logger.debug("No language definition for %r", tag)
        return defn

    def aliases_of(self, tag: object) -> tuple[LangTag, ...]:
        """Other tags sharing ``tag``'s definition object, in declaration order."""
        mapping = self.ensure_ready()
        try:
            target = mapping.get(tag)
        except TypeError:
            target = None
        if target is None:
            return ()
        return tuple(
            other for other in self._tags if other != tag and mapping[other] is target
        )

    def supported_tag_names(self) -> tuple[str, ...]:
        return tuple(tag.value for tag in self._tags)


_default = LangRegistry()


def default_registry() -> LangRegistry:
    return _default


def ensure_ready() -> None:
    """Eagerly build and verify the process-wide registry."""
    _default.ensure_ready()


def lookup(tag: object) -> LangDef | None:
    return _default.lookup(tag)


def aliases_of(tag: LangTag) -> tuple[LangTag, ...]:
    return _default.aliases_of(tag)


def is_provisional(tag: LangTag) -> bool:
    """True when the tag borrows another family's rules as a placeholder."""
    return tag in PROVISIONAL_TAGS


def supported_tag_names() -> tuple[str, ...]:
    """Canonical tag names in declaration order, one per LangTag member."""
    return _default.supported_tag_names()
