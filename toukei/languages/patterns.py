"""Compiled declaration patterns, cached per family definition."""

from __future__ import annotations

import re
from functools import lru_cache

from toukei.languages.definitions import LangDef


@lru_cache(maxsize=None)
def function_regexes(defn: LangDef) -> tuple[re.Pattern[str], ...]:
    """Compiled ``function_patterns`` for ``defn``."""
    return tuple(re.compile(p) for p in defn.function_patterns)


@lru_cache(maxsize=None)
def class_regexes(defn: LangDef) -> tuple[re.Pattern[str], ...]:
    """Compiled ``class_patterns`` for ``defn``."""
    return tuple(re.compile(p) for p in defn.class_patterns)


def matches_function(defn: LangDef, line: str) -> bool:
    return any(rx.search(line) for rx in function_regexes(defn))


def matches_class(defn: LangDef, line: str) -> bool:
    return any(rx.search(line) for rx in class_regexes(defn))
