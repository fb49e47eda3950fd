"""Recipe catalog contract.

Rules:
- Every method is asynchronous because it performs a single remote round trip.
- The fail-soft methods never raise for transport or parse problems; the
  `lookup_*` methods expose the outcome for diagnostics.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import DetailLookup, RecipeDetail, RecipeSummary, RegionListing


@runtime_checkable
class RecipeCatalog(Protocol):
    """Read-only query surface of the remote recipe catalog."""

    async def list_regions(self) -> list[str]:
        """Regions known to the catalog, `[]` on failure."""

        ...

    async def list_by_region(self, region: str) -> list[RecipeSummary]:
        """Recipe summaries for `region` in catalog order, `[]` on failure."""

        ...

    async def fetch_detail_by_name(self, name: str) -> RecipeDetail | None:
        """Full detail for `name`, None when not found or on failure."""

        ...

    async def lookup_region(self, region: str) -> RegionListing:
        ...

    async def lookup_detail(self, name: str) -> DetailLookup:
        ...
