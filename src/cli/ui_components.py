"""CLI UI components (Rich).

Notes:
- Command logic stays in `cli.main`; this module only builds renderables.
- Tables and panels are reused by the one-shot commands and the
  interactive presenter.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import FilterResult, RecipeDetail, RecipeSummary


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in non-interactive output modes)."""

    title = Text("recipe-scout", style="bold green")
    subtitle = Text("Browse by region • Exclude ingredients • Read the recipe", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def build_regions_table(regions: Sequence[str]) -> Table:
    table = Table(title="Regions")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Region", style="cyan")
    for index, region in enumerate(regions, start=1):
        table.add_row(str(index), Text(region))
    return table


def build_recipes_table(result: FilterResult) -> Table:
    """One row per surviving recipe, numbered for selection."""

    title = f"{result.region} recipes"
    if result.exclusion_term.strip():
        title += f' without "{result.exclusion_term.strip()}"'
    table = Table(
        title=Text(title),
        caption=f"{len(result.shown)} shown of {result.total_candidates}",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Recipe", style="bold white")
    table.add_column("Thumbnail", style="magenta", overflow="fold")
    for index, recipe in enumerate(result.shown, start=1):
        table.add_row(str(index), Text(recipe.name), Text(recipe.thumbnail_url))
    return table


def build_detail_panel(summary: RecipeSummary, detail: RecipeDetail) -> Panel:
    """Full recipe view: header, ingredients, instructions."""

    header = Text()
    header.append("Category: ", style="bold")
    header.append(detail.category or "N/A")
    header.append(" | ")
    header.append("Area: ", style="bold")
    header.append(detail.area or "N/A")
    image = summary.thumbnail_url or detail.thumbnail_url
    if image:
        header.append(f"\n{image}", style="dim")

    ingredients = Text()
    ingredients.append("Ingredients\n", style="bold green")
    for label in detail.ingredient_labels:
        ingredients.append(f"• {label}\n")
    if not detail.ingredients:
        ingredients.append("(none listed)\n", style="dim")

    instructions = Text()
    instructions.append("Instructions\n", style="bold green")
    instructions.append((detail.instructions or "No instructions available.").strip())

    return Panel(
        Group(header, Text(), ingredients, instructions),
        title=Text(detail.name, style="bold"),
        border_style="green",
    )
