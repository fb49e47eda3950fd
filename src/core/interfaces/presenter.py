"""Presentation port.

The core hands already-decided data to a presenter and never inspects how it
is rendered.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import FilterResult, RecipeDetail, RecipeSummary


@runtime_checkable
class RecipePresenter(Protocol):
    def clear(self) -> None:
        """Drop whatever the previous run rendered."""

        ...

    def show_regions(self, regions: Sequence[str]) -> None:
        ...

    def show_recipes(self, result: FilterResult) -> None:
        """Render the surviving recipes of a filter run as selectable cards."""

        ...

    def show_empty(self, message: str) -> None:
        ...

    def show_detail(self, summary: RecipeSummary, detail: RecipeDetail) -> None:
        ...

    def show_error(self, message: str) -> None:
        """Direct user notification (used only when opening a detail fails)."""

        ...
