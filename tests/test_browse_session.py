"""Unit tests for the interactive browse controller."""

import asyncio

import pytest

from conftest import FakeCatalog, make_summary
from core.services.browse_session import DETAIL_UNAVAILABLE_MESSAGE, BrowseSession


def _session(catalog, presenter, debounce=0.0):
    return BrowseSession(catalog=catalog, presenter=presenter, debounce_seconds=debounce)


class TestRefresh:
    """Rendering of a completed run."""

    @pytest.mark.asyncio
    async def test_select_region_clears_then_renders(self, italian_catalog, presenter):
        session = _session(italian_catalog, presenter)
        result = await session.select_region("Italian")

        assert presenter.events[0] == ("clear", None)
        assert presenter.of("recipes") == [["Lasagne", "Spaghetti Carbonara", "Pizza Margherita"]]
        assert result.total_candidates == 3
        assert session.last_result is result

    @pytest.mark.asyncio
    async def test_all_filtered_out_message(self, italian_catalog, presenter):
        session = _session(italian_catalog, presenter)
        session.exclusion_term = "a"
        await session.select_region("Italian")
        assert presenter.of("empty") == ['No meals found without "a".']

    @pytest.mark.asyncio
    async def test_no_candidates_message(self, italian_catalog, presenter):
        await _session(italian_catalog, presenter).select_region("Atlantis")
        assert presenter.of("empty") == ["No meals found for this area."]

    @pytest.mark.asyncio
    async def test_listing_failure_message(self, presenter):
        catalog = FakeCatalog(failing_regions=["Italian"])
        await _session(catalog, presenter).select_region("Italian")
        assert presenter.of("empty") == ["Error loading meals. Please try again."]

    @pytest.mark.asyncio
    async def test_blank_region_only_clears(self, italian_catalog, presenter):
        await _session(italian_catalog, presenter).select_region("")
        assert presenter.events == [("clear", None)]
        assert italian_catalog.region_calls == []

    @pytest.mark.asyncio
    async def test_load_regions(self, italian_catalog, presenter):
        regions = await _session(italian_catalog, presenter).load_regions()
        assert regions == ["Italian", "French"]
        assert presenter.of("regions") == [["Italian", "French"]]


class TestStaleRuns:
    """A run overtaken by a newer one is discarded."""

    @pytest.mark.asyncio
    async def test_stale_run_is_not_rendered(self, presenter):
        gate = asyncio.Event()
        catalog = FakeCatalog(
            listings={"Italian": [make_summary("Lasagne")], "French": [make_summary("Ratatouille")]},
            listing_gates={"Italian": gate},
        )
        session = _session(catalog, presenter)

        slow = asyncio.create_task(session.select_region("Italian"))
        await asyncio.sleep(0)
        fresh = await session.select_region("French")
        gate.set()
        stale = await slow

        assert stale is None
        assert fresh.region == "French"
        assert presenter.of("recipes") == [["Ratatouille"]]
        assert session.last_result is fresh
        assert session.generation == 2
        # The overtaken run still completed its work.
        assert "Lasagne" in session.cache


class TestDebounce:
    """Exclusion-term changes collapse into one run."""

    @pytest.mark.asyncio
    async def test_rapid_changes_trigger_one_run_with_latest_term(self, italian_catalog, presenter):
        session = _session(italian_catalog, presenter, debounce=0.05)
        await session.select_region("Italian")

        for term in ("e", "eg", "egg"):
            session.set_exclusion_term(term)
        result = await session.settle()

        assert italian_catalog.region_calls == ["Italian", "Italian"]
        assert result.exclusion_term == "egg"
        assert presenter.of("recipes")[-1] == ["Lasagne", "Pizza Margherita"]

    @pytest.mark.asyncio
    async def test_term_change_without_region_schedules_nothing(self, italian_catalog, presenter):
        session = _session(italian_catalog, presenter)
        session.set_exclusion_term("egg")
        assert await session.settle() is None
        assert italian_catalog.region_calls == []
        assert session.exclusion_term == "egg"

    @pytest.mark.asyncio
    async def test_region_change_cancels_pending_term_refresh(self, italian_catalog, presenter):
        session = _session(italian_catalog, presenter, debounce=0.05)
        await session.select_region("Italian")
        session.set_exclusion_term("egg")
        await session.select_region("French")
        await session.settle()

        assert italian_catalog.region_calls == ["Italian", "French"]

    @pytest.mark.asyncio
    async def test_aclose_cancels_pending_refresh(self, italian_catalog, presenter):
        session = _session(italian_catalog, presenter, debounce=0.05)
        await session.select_region("Italian")
        session.set_exclusion_term("egg")
        await session.aclose()
        await asyncio.sleep(0.08)

        assert italian_catalog.region_calls == ["Italian"]


class TestOpenDetail:
    """The one path where a failed lookup is shown to the user."""

    @pytest.mark.asyncio
    async def test_reuses_detail_resolved_by_filter(self, italian_catalog, presenter):
        session = _session(italian_catalog, presenter)
        result = await session.select_region("Italian")
        calls_before = len(italian_catalog.detail_calls)

        detail = await session.open_detail(result.shown[0])

        assert detail.name == "Lasagne"
        assert presenter.of("detail") == ["Lasagne"]
        assert len(italian_catalog.detail_calls) == calls_before

    @pytest.mark.asyncio
    async def test_unresolvable_recipe_notifies_user(self, italian_catalog, presenter):
        session = _session(italian_catalog, presenter)
        assert await session.open_detail("Ghost Pie") is None
        assert await session.open_detail("Ghost Pie") is None

        assert presenter.of("error") == [DETAIL_UNAVAILABLE_MESSAGE] * 2
        assert italian_catalog.detail_calls == ["Ghost Pie"]

    @pytest.mark.asyncio
    async def test_open_by_name(self, italian_catalog, presenter):
        detail = await _session(italian_catalog, presenter).open_detail("Pizza Margherita")
        assert detail.name == "Pizza Margherita"
        assert presenter.of("detail") == ["Pizza Margherita"]
