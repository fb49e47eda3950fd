"""Terminal presenter: renders pipeline output with Rich."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.text import Text

from cli.ui_components import build_detail_panel, build_recipes_table, build_regions_table
from core.domain.models import FilterResult, RecipeDetail, RecipeSummary
from core.interfaces.presenter import RecipePresenter


class RichPresenter(RecipePresenter):
    """Implements `RecipePresenter` on a Rich console.

    `cards` mirrors what is currently on screen so the interactive loop can
    map a typed number back to a recipe.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.cards: list[RecipeSummary] = []

    def clear(self) -> None:
        self.cards = []

    def show_regions(self, regions: Sequence[str]) -> None:
        if not regions:
            self.console.print("[yellow]No regions available.[/yellow]")
            return
        self.console.print(build_regions_table(regions))

    def show_recipes(self, result: FilterResult) -> None:
        self.cards = list(result.shown)
        self.console.print(build_recipes_table(result))

    def show_empty(self, message: str) -> None:
        self.cards = []
        self.console.print(Text(message, style="yellow"))

    def show_detail(self, summary: RecipeSummary, detail: RecipeDetail) -> None:
        self.console.print(build_detail_panel(summary, detail))

    def show_error(self, message: str) -> None:
        self.console.print(Text(message, style="red"))
