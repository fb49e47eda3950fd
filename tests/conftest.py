"""Shared fixtures: an in-memory catalog and a recording presenter."""

from __future__ import annotations

import asyncio
import os
from typing import Sequence

import pytest

from core.domain.models import (
    DetailLookup,
    FilterResult,
    IngredientLine,
    LookupStatus,
    RecipeDetail,
    RecipeSummary,
    RegionListing,
)


def make_summary(name: str) -> RecipeSummary:
    return RecipeSummary(name=name, thumbnail_url=f"https://img.test/{name.replace(' ', '_')}.jpg")


def make_detail(name: str, *ingredients: str) -> RecipeDetail:
    return RecipeDetail(
        name=name,
        category="Test",
        area="Testland",
        instructions="Mix and serve.",
        ingredients=tuple(IngredientLine(name=i) for i in ingredients),
    )


class FakeCatalog:
    """In-memory `RecipeCatalog` that records every remote call."""

    def __init__(
        self,
        *,
        listings: dict[str, list[RecipeSummary]] | None = None,
        details: dict[str, RecipeDetail] | None = None,
        regions: Sequence[str] = (),
        failing_regions: Sequence[str] = (),
        listing_gates: dict[str, asyncio.Event] | None = None,
        detail_delay: float = 0.0,
    ) -> None:
        self.listings = listings or {}
        self.details = details or {}
        self.regions = list(regions)
        self.failing_regions = set(failing_regions)
        self.listing_gates = listing_gates or {}
        self.detail_delay = detail_delay
        self.region_calls: list[str] = []
        self.detail_calls: list[str] = []

    async def list_regions(self) -> list[str]:
        return list(self.regions)

    async def lookup_region(self, region: str) -> RegionListing:
        self.region_calls.append(region)
        gate = self.listing_gates.get(region)
        if gate is not None:
            await gate.wait()
        if region in self.failing_regions:
            return RegionListing(region=region, status=LookupStatus.ERROR, error="boom")
        recipes = list(self.listings.get(region, []))
        status = LookupStatus.FOUND if recipes else LookupStatus.NOT_FOUND
        return RegionListing(region=region, recipes=recipes, status=status)

    async def list_by_region(self, region: str) -> list[RecipeSummary]:
        return (await self.lookup_region(region)).recipes

    async def lookup_detail(self, name: str) -> DetailLookup:
        self.detail_calls.append(name)
        if self.detail_delay:
            await asyncio.sleep(self.detail_delay)
        detail = self.details.get(name)
        status = LookupStatus.FOUND if detail else LookupStatus.NOT_FOUND
        return DetailLookup(name=name, detail=detail, status=status)

    async def fetch_detail_by_name(self, name: str) -> RecipeDetail | None:
        return (await self.lookup_detail(name)).detail


class RecordingPresenter:
    """`RecipePresenter` that keeps every call as an (event, payload) tuple."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def clear(self) -> None:
        self.events.append(("clear", None))

    def show_regions(self, regions: Sequence[str]) -> None:
        self.events.append(("regions", list(regions)))

    def show_recipes(self, result: FilterResult) -> None:
        self.events.append(("recipes", [r.name for r in result.shown]))

    def show_empty(self, message: str) -> None:
        self.events.append(("empty", message))

    def show_detail(self, summary: RecipeSummary, detail: RecipeDetail) -> None:
        self.events.append(("detail", detail.name))

    def show_error(self, message: str) -> None:
        self.events.append(("error", message))

    def of(self, event: str) -> list[object]:
        return [payload for name, payload in self.events if name == event]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep local `.env` files and RECIPE_SCOUT_* variables out of the tests."""

    for key in list(os.environ):
        if key.startswith("RECIPE_SCOUT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def italian_catalog() -> FakeCatalog:
    """Three Italian recipes; only the carbonara uses egg."""

    return FakeCatalog(
        regions=["Italian", "French"],
        listings={
            "Italian": [
                make_summary("Lasagne"),
                make_summary("Spaghetti Carbonara"),
                make_summary("Pizza Margherita"),
            ],
        },
        details={
            "Lasagne": make_detail("Lasagne", "Pasta Sheets", "Beef Mince", "Mozzarella"),
            "Spaghetti Carbonara": make_detail("Spaghetti Carbonara", "Spaghetti", "Egg Yolks", "Pancetta"),
            "Pizza Margherita": make_detail("Pizza Margherita", "Flour", "Tomato", "Mozzarella"),
        },
    )


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()
