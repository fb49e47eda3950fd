"""Cache-first detail resolution with per-name request coalescing."""

from __future__ import annotations

import asyncio
import logging

from core.domain.models import RecipeDetail
from core.interfaces.catalog import RecipeCatalog
from core.services.detail_cache import ABSENT, DetailCache

logger = logging.getLogger(__name__)


class DetailResolver:
    """Resolve recipe details through a shared `DetailCache`.

    At most one remote lookup is issued per recipe name: a cache hit returns
    without I/O, and concurrent callers asking for the same uncached name
    await the same in-flight request instead of starting their own.
    """

    def __init__(self, catalog: RecipeCatalog, cache: DetailCache | None = None) -> None:
        self._catalog = catalog
        self.cache = cache if cache is not None else DetailCache()
        self._in_flight: dict[str, asyncio.Task[RecipeDetail | None]] = {}

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    async def resolve(self, name: str) -> RecipeDetail | None:
        cached = self.cache.get(name)
        if cached is not ABSENT:
            logger.debug("Detail cache hit for %r", name)
            return cached  # type: ignore[return-value]

        task = self._in_flight.get(name)
        if task is None:
            logger.debug("Detail cache miss for %r, fetching", name)
            task = asyncio.create_task(self._fetch(name))
            self._in_flight[name] = task
        else:
            logger.debug("Joining in-flight lookup for %r", name)

        # One caller being cancelled must not cancel the shared lookup.
        return await asyncio.shield(task)

    async def _fetch(self, name: str) -> RecipeDetail | None:
        try:
            detail = await self._catalog.fetch_detail_by_name(name)
            return self.cache.set(name, detail)
        finally:
            self._in_flight.pop(name, None)
