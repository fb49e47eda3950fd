"""Doctor commands: environment diagnostics and configuration."""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.mealdb.models import MealsEnvelope
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_catalog(settings: AppSettings) -> tuple[bool, str]:
    """Hit the region listing directly so failures are reported, not downgraded."""

    try:
        async with build_async_client(settings) as client:
            response = await client.get("list.php", params={"a": "list"})
        response.raise_for_status()
        envelope = MealsEnvelope.model_validate(response.json())
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__
    return True, f"HTTP {response.status_code}, {len(envelope.meals or [])} regions"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="recipe-scout Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Catalog base_url", "OK", settings.catalog_base_url)
    if settings.http_timeout_seconds is None:
        table.add_row("HTTP timeout", "OPTIONAL", "No timeout -> a hung request blocks that run")
    else:
        table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Filter debounce", "OK", f"{settings.filter_debounce_seconds:g}s")
    table.add_row("Log", "OK", f"{settings.log_level} ({settings.log_format})")

    user_env = get_user_env_file()
    table.add_row("User config", "OK" if user_env.exists() else "OPTIONAL", str(user_env))

    ok_catalog, detail_catalog = asyncio.run(_check_catalog(settings))
    table.add_row("Catalog connectivity", "OK" if ok_catalog else "FAIL", detail_catalog)

    _console.print(table)

    if not ok_catalog:
        _console.print(
            "\n[yellow]Note:[/yellow] Browsing still works offline-safe: "
            "failed lookups show empty results instead of crashing."
        )
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()

    base_url = typer.prompt(
        "Catalog base URL",
        default=current.catalog_base_url,
        show_default=True,
    ).strip()
    timeout = typer.prompt(
        "HTTP timeout in seconds (0 = none)",
        default=f"{current.http_timeout_seconds or 0:g}",
        show_default=True,
    ).strip()
    debounce = typer.prompt(
        "Filter debounce in seconds",
        default=f"{current.filter_debounce_seconds:g}",
        show_default=True,
    ).strip()

    if not base_url:
        raise typer.BadParameter("base URL is required")
    try:
        timeout_value = float(timeout)
        debounce_value = float(debounce)
    except ValueError as exc:
        raise typer.BadParameter("timeout and debounce must be numbers") from exc
    if timeout_value < 0 or debounce_value < 0:
        raise typer.BadParameter("timeout and debounce must not be negative")

    # Same validation the next load applies.
    try:
        AppSettings(
            catalog_base_url=base_url,
            http_timeout_seconds=timeout_value or None,
            filter_debounce_seconds=debounce_value,
        )
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in exc.errors())
        raise typer.BadParameter(problems) from exc

    env_path = write_user_env_vars(
        {
            "RECIPE_SCOUT_CATALOG_BASE_URL": base_url,
            # Empty values are ignored on load, so the default (no timeout) applies.
            "RECIPE_SCOUT_HTTP_TIMEOUT_SECONDS": f"{timeout_value:g}" if timeout_value else "",
            "RECIPE_SCOUT_FILTER_DEBOUNCE_SECONDS": f"{debounce_value:g}",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
