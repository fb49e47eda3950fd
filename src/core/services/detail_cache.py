"""Session-scoped memo of recipe detail lookups."""

from __future__ import annotations

import logging
from typing import Final

from core.domain.models import RecipeDetail

logger = logging.getLogger(__name__)


class _Absent:
    """Marker for "never looked up" (distinct from a cached None)."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _Absent()


class DetailCache:
    """Memoizing `name -> RecipeDetail | None` store.

    Rules:
    - Keys are recipe names, case-sensitive, exactly as the catalog returns them.
    - A stored None means the lookup was attempted and yielded nothing.
    - Entries are write-once: no eviction, no invalidation, no size bound.
    """

    def __init__(self) -> None:
        self._entries: dict[str, RecipeDetail | None] = {}

    def get(self, name: str) -> RecipeDetail | None | _Absent:
        return self._entries.get(name, ABSENT)

    def set(self, name: str, value: RecipeDetail | None) -> RecipeDetail | None:
        """Store `value` for `name` unless already stored; returns the kept value."""

        if name in self._entries:
            logger.debug("Detail cache already holds %r, keeping first value", name)
            return self._entries[name]
        self._entries[name] = value
        return value

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
