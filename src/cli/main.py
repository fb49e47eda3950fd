"""recipe-scout CLI (Typer).

Commands:
- `regions`      list the regions known to the catalog
- `browse`       one filter run for a region, optionally excluding an ingredient
- `show`         full detail for one recipe
- `interactive`  prompt loop over a single session (shared detail cache)
- `doctor`       diagnostics and configuration
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import export_filter_result_json
from adapters.mealdb import MealDBCatalog
from cli import doctor
from cli.presenter import RichPresenter
from cli.ui_components import print_banner
from core.config import AppSettings
from core.domain.models import EmptyReason
from core.interfaces.catalog import RecipeCatalog
from core.log import configure_logging
from core.services.browse_session import BrowseSession

app = typer.Typer(
    no_args_is_help=True,
    help="Browse recipes by region and hide the ones containing an ingredient you dislike.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

INTERACTIVE_HELP = (
    "Commands: [bold]region[/bold] <name|#>, [bold]exclude[/bold] [term], "
    "[bold]open[/bold] <#>, [bold]regions[/bold], [bold]help[/bold], [bold]quit[/bold]"
)


def build_catalog(settings: AppSettings) -> RecipeCatalog:
    return MealDBCatalog(settings)


def _new_session(settings: AppSettings, presenter: RichPresenter) -> BrowseSession:
    return BrowseSession(
        catalog=build_catalog(settings),
        presenter=presenter,
        debounce_seconds=settings.filter_debounce_seconds,
    )


def _settings(ctx: typer.Context) -> AppSettings:
    settings = ctx.obj
    if not isinstance(settings, AppSettings):
        settings = AppSettings()
    return settings


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log diagnostics at DEBUG level."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print("[red]Invalid configuration:[/red]")
        _console.print(str(exc), markup=False, highlight=False)
        raise typer.Exit(code=2) from exc
    if verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    configure_logging(settings)
    ctx.obj = settings


@app.command()
def regions(ctx: typer.Context) -> None:
    """List the regions known to the catalog."""

    session = _new_session(_settings(ctx), RichPresenter(_console))
    found = asyncio.run(session.load_regions())
    if not found:
        raise typer.Exit(code=1)


@app.command()
def browse(
    ctx: typer.Context,
    region: str = typer.Argument(..., help="Region (catalog area), e.g. Italian."),
    exclude: str = typer.Option("", "--exclude", "-x", help="Hide recipes with an ingredient containing this text."),
    details: bool = typer.Option(False, "--details", "-d", help="Also print the full recipe of every shown result."),
    json_out: Path | None = typer.Option(None, "--json-out", help="Write the filter result to this JSON file."),
) -> None:
    """Filter one region's recipes and print the survivors."""

    if not region.strip():
        raise typer.BadParameter("region must not be empty", param_hint="REGION")

    session = _new_session(_settings(ctx), RichPresenter(_console))

    async def _run():
        session.exclusion_term = exclude
        result = await session.select_region(region)
        if result is not None and details:
            for recipe in result.shown:
                await session.open_detail(recipe)
        return result

    result = asyncio.run(_run())
    if result is None:
        raise typer.Exit(code=1)

    if json_out is not None:
        path = export_filter_result_json(result=result, output_path=json_out)
        _console.print(f"[green]Saved:[/green] {path}")

    if result.empty_reason is EmptyReason.LISTING_FAILED:
        raise typer.Exit(code=1)


@app.command()
def show(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Recipe name; an exact match is preferred."),
) -> None:
    """Print the full recipe for NAME."""

    session = _new_session(_settings(ctx), RichPresenter(_console))
    detail = asyncio.run(session.open_detail(name))
    if detail is None:
        raise typer.Exit(code=1)


def parse_command(line: str) -> tuple[str, str]:
    """Split an interactive line into (verb, argument).

    A bare number is shorthand for `open <n>`.
    """

    text = line.strip()
    if not text:
        return "", ""
    verb, _, arg = text.partition(" ")
    verb = verb.lower()
    if verb.isdigit() and not arg:
        return "open", verb
    return verb, arg.strip()


def _pick(items: list, token: str):
    """Resolve a 1-based index token into an element of `items`, else None."""

    if not token.isdigit():
        return None
    index = int(token) - 1
    if 0 <= index < len(items):
        return items[index]
    return None


async def _interactive_loop(session: BrowseSession, presenter: RichPresenter) -> None:
    known_regions = await session.load_regions()
    presenter.console.print(INTERACTIVE_HELP)

    try:
        while True:
            try:
                line = await asyncio.to_thread(typer.prompt, "recipe-scout", default="", show_default=False)
            except typer.Abort:
                # End of input (Ctrl-D) or Ctrl-C at the prompt.
                presenter.console.print()
                break
            verb, arg = parse_command(line)

            if verb in ("quit", "exit", "q"):
                break
            if verb in ("", "help", "?"):
                presenter.console.print(INTERACTIVE_HELP)
            elif verb == "regions":
                known_regions = await session.load_regions()
            elif verb == "region":
                region = _pick(known_regions, arg) or arg
                if not region:
                    presenter.show_error("Usage: region <name|#>")
                    continue
                await session.select_region(region)
            elif verb == "exclude":
                session.set_exclusion_term(arg)
                if not session.region:
                    presenter.console.print(f'Exclusion set to "{arg}". Pick a region to see results.', markup=False)
                await session.settle()
            elif verb == "open":
                recipe = _pick(presenter.cards, arg)
                if recipe is None:
                    presenter.show_error(f"No recipe #{arg} on screen.")
                    continue
                await session.open_detail(recipe)
            else:
                presenter.show_error(f"Unknown command: {verb}")
    finally:
        await session.aclose()


@app.command()
def interactive(ctx: typer.Context) -> None:
    """Prompt loop: pick a region, change the exclusion, open recipes."""

    presenter = RichPresenter(_console)
    print_banner(_console)
    session = _new_session(_settings(ctx), presenter)
    asyncio.run(_interactive_loop(session, presenter))


def run() -> None:
    app()
