"""TheMealDB catalog client.

Endpoints (relative to `AppSettings.catalog_base_url`):
- `list.php?a=list`     regions
- `filter.php?a=<area>` recipe summaries for a region
- `search.php?s=<name>` detail records (substring search upstream)

Each call is a single round trip without retry. Transport and parse
failures are logged and downgraded here; they never reach the pipeline as
exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_async_client
from adapters.mealdb.models import AreaPayload, MealPayload, MealSummaryPayload, MealsEnvelope
from core.config import AppSettings
from core.domain.models import (
    DetailLookup,
    LookupStatus,
    RecipeDetail,
    RecipeSummary,
    RegionListing,
)
from core.interfaces.catalog import RecipeCatalog

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)

# JSON decode errors and pydantic ValidationError are both ValueError.
_CATALOG_ERRORS = (httpx.HTTPError, ValueError)


def pick_detail_record(records: Sequence[MealPayload], name: str) -> MealPayload | None:
    """Prefer the record named exactly `name`, else the first one, else None."""

    for record in records:
        if record.name == name:
            return record
    return records[0] if records else None


def _describe(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


class MealDBCatalog(RecipeCatalog):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def _get_meals(self, path: str, params: dict[str, str]) -> list[dict[str, Any]]:
        async with build_async_client(self._settings, transport=self._transport) as client:
            response = await client.get(path, params=params)
        response.raise_for_status()
        envelope = MealsEnvelope.model_validate(response.json())
        return envelope.meals or []

    @staticmethod
    def _parse(records: list[dict[str, Any]], model: type[_M]) -> list[_M]:
        parsed: list[_M] = []
        for raw in records:
            try:
                parsed.append(model.model_validate(raw))
            except ValidationError as exc:
                logger.warning(
                    "Skipping malformed %s record: %s",
                    model.__name__,
                    exc.errors(include_url=False)[:1],
                )
        return parsed

    async def list_regions(self) -> list[str]:
        try:
            records = await self._get_meals("list.php", {"a": "list"})
        except _CATALOG_ERRORS as exc:
            logger.warning("Error loading areas: %s", _describe(exc), exc_info=True)
            return []
        return [entry.area for entry in self._parse(records, AreaPayload)]

    async def lookup_region(self, region: str) -> RegionListing:
        if not region or not region.strip():
            return RegionListing(region=region or "", status=LookupStatus.NOT_FOUND)

        try:
            records = await self._get_meals("filter.php", {"a": region})
        except _CATALOG_ERRORS as exc:
            logger.warning("Error loading meals for %r: %s", region, _describe(exc), exc_info=True)
            return RegionListing(region=region, status=LookupStatus.ERROR, error=_describe(exc))

        recipes = [entry.to_summary() for entry in self._parse(records, MealSummaryPayload)]
        if records and not recipes:
            logger.warning("Every meal record for %r was malformed", region)
            return RegionListing(region=region, status=LookupStatus.ERROR, error="malformed listing")
        return RegionListing(
            region=region,
            recipes=recipes,
            status=LookupStatus.FOUND if recipes else LookupStatus.NOT_FOUND,
        )

    async def list_by_region(self, region: str) -> list[RecipeSummary]:
        return (await self.lookup_region(region)).recipes

    async def lookup_detail(self, name: str) -> DetailLookup:
        try:
            records = await self._get_meals("search.php", {"s": name})
        except _CATALOG_ERRORS as exc:
            logger.warning("Error fetching meal details for %r: %s", name, _describe(exc), exc_info=True)
            return DetailLookup(name=name, status=LookupStatus.ERROR, error=_describe(exc))

        record = pick_detail_record(self._parse(records, MealPayload), name)
        if record is None:
            logger.debug("No catalog match for %r", name)
            return DetailLookup(name=name, status=LookupStatus.NOT_FOUND)
        return DetailLookup(name=name, detail=record.to_detail(), status=LookupStatus.FOUND)

    async def fetch_detail_by_name(self, name: str) -> RecipeDetail | None:
        return (await self.lookup_detail(name)).detail
