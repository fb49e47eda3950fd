"""Interactive browse controller.

This module owns the state a user manipulates (selected region, exclusion
term) and drives the filter pipeline and the presenter. It keeps the
pipeline reusable for other entry-points (tests, batch jobs) and keeps
rendering out of the core logic.

Concurrency rules:
- Every refresh takes a new generation number; a run that finishes after a
  newer one has started is discarded instead of rendered.
- Exclusion-term changes are debounced: rapid successive changes collapse
  into a single run that uses the latest term.
- All runs share one `DetailCache` through one `DetailResolver`.
"""

from __future__ import annotations

import asyncio
import logging

from core.domain.models import FilterResult, RecipeDetail, RecipeSummary
from core.interfaces.catalog import RecipeCatalog
from core.interfaces.presenter import RecipePresenter
from core.services.detail_cache import DetailCache
from core.services.detail_resolver import DetailResolver
from core.services.filter_pipeline import FilterPipeline

logger = logging.getLogger(__name__)

DETAIL_UNAVAILABLE_MESSAGE = "Unable to load recipe details."


class BrowseSession:
    def __init__(
        self,
        *,
        catalog: RecipeCatalog,
        presenter: RecipePresenter,
        cache: DetailCache | None = None,
        debounce_seconds: float = 0.3,
    ) -> None:
        self._catalog = catalog
        self._presenter = presenter
        self.cache = cache if cache is not None else DetailCache()
        self.resolver = DetailResolver(catalog, self.cache)
        self.pipeline = FilterPipeline(catalog, self.resolver)
        self._debounce_seconds = debounce_seconds

        self.region = ""
        self.exclusion_term = ""
        self.last_result: FilterResult | None = None

        self._generation = 0
        self._timer: asyncio.Task[None] | None = None
        self._runs: set[asyncio.Task[FilterResult | None]] = set()

    @property
    def generation(self) -> int:
        return self._generation

    async def load_regions(self) -> list[str]:
        regions = await self._catalog.list_regions()
        self._presenter.show_regions(regions)
        return regions

    async def select_region(self, region: str) -> FilterResult | None:
        """Switch region and refresh immediately."""

        self.region = region
        self._cancel_timer()
        return await self.refresh()

    def set_exclusion_term(self, term: str) -> None:
        """Record a new exclusion term and schedule a debounced refresh.

        Must be called from a running event loop. Nothing is scheduled while
        no region is selected.
        """

        self.exclusion_term = term
        if not self.region.strip():
            return
        self._cancel_timer()
        self._timer = asyncio.create_task(self._debounced_refresh())

    async def refresh(self) -> FilterResult | None:
        """Run the pipeline for the current state and render it.

        Returns None when a newer run started before this one finished.
        """

        self._generation += 1
        generation = self._generation
        region, term = self.region, self.exclusion_term

        self._presenter.clear()
        result = await self.pipeline.run_filter(region, term)

        if generation != self._generation:
            logger.debug(
                "Discarding stale filter run %d (current is %d)",
                generation,
                self._generation,
            )
            return None

        self.last_result = result
        if not region.strip():
            return result

        message = result.empty_message()
        if message is not None:
            self._presenter.show_empty(message)
        else:
            self._presenter.show_recipes(result)
        return result

    async def open_detail(self, recipe: RecipeSummary | str) -> RecipeDetail | None:
        """Resolve and show one recipe; notifies the user when it cannot be loaded."""

        name = recipe.name if isinstance(recipe, RecipeSummary) else recipe
        detail = await self.resolver.resolve(name)
        if detail is None:
            self._presenter.show_error(DETAIL_UNAVAILABLE_MESSAGE)
            return None

        summary = (
            recipe
            if isinstance(recipe, RecipeSummary)
            else RecipeSummary(name=name, thumbnail_url=detail.thumbnail_url or "")
        )
        self._presenter.show_detail(summary, detail)
        return detail

    async def settle(self) -> FilterResult | None:
        """Wait for any scheduled or running refresh, then return the latest result."""

        while True:
            pending = [task for task in (self._timer, *self._runs) if task is not None and not task.done()]
            if not pending:
                return self.last_result
            await asyncio.wait(pending)

    async def aclose(self) -> None:
        self._cancel_timer()
        for task in list(self._runs):
            task.cancel()
        if self._runs:
            await asyncio.wait(list(self._runs))

    async def _debounced_refresh(self) -> None:
        await asyncio.sleep(self._debounce_seconds)
        self._timer = None
        # A later term change cancels only the wait, never a started run.
        task = asyncio.create_task(self.refresh())
        self._runs.add(task)
        task.add_done_callback(self._run_finished)

    def _run_finished(self, task: asyncio.Task[FilterResult | None]) -> None:
        self._runs.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Filter run failed", exc_info=exc)

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None
