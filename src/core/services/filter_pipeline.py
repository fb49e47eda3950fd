"""Region filter pipeline.

For one region and exclusion term:
1. Fetch the candidate listing.
2. Resolve each candidate's detail, one at a time, through the resolver.
3. Drop candidates whose detail contains the excluded ingredient.

Survivors keep the listing order. A candidate whose detail cannot be
resolved is always kept.
"""

from __future__ import annotations

import logging

from core.domain.models import FilterResult
from core.interfaces.catalog import RecipeCatalog
from core.services.detail_resolver import DetailResolver
from core.services.ingredient_filter import excludes

logger = logging.getLogger(__name__)


class FilterPipeline:
    """Stateless between runs; the resolver's cache is the only shared state."""

    def __init__(self, catalog: RecipeCatalog, resolver: DetailResolver | None = None) -> None:
        self._catalog = catalog
        self.resolver = resolver if resolver is not None else DetailResolver(catalog)

    async def run_filter(self, region: str, exclusion_term: str = "") -> FilterResult:
        exclusion_term = exclusion_term or ""
        if not region or not region.strip():
            return FilterResult(region=region or "", exclusion_term=exclusion_term)

        listing = await self._catalog.lookup_region(region)
        candidates = listing.recipes

        shown = []
        for candidate in candidates:
            detail = await self.resolver.resolve(candidate.name)
            if excludes(detail, exclusion_term):
                logger.debug("Excluding %r (contains %r)", candidate.name, exclusion_term)
                continue
            shown.append(candidate)

        logger.debug(
            "Filter run for %r: %d of %d candidates shown",
            region,
            len(shown),
            len(candidates),
        )
        return FilterResult(
            region=region,
            exclusion_term=exclusion_term,
            shown=shown,
            total_candidates=len(candidates),
            listing_status=listing.status,
        )
