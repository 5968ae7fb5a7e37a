#!/usr/bin/env python3
"""iconpacks - list, search and resolve icons from icon packs."""

import json
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from iconpacks.config.types import PacksConfig
from iconpacks.errors import IconPackError
from iconpacks.log import configure_logging
from iconpacks.resolver import IconResolver
from iconpacks.search import SEARCH_MAX_RESULT, IconSearcher

app = typer.Typer(
    name="iconpacks",
    help="Icon packs - list, search and resolve pack_id:icon_id references",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()


def load_resolver(config_path: Optional[Path]) -> IconResolver:
    """Build a resolver from a packs.yaml file, or the packaged defaults."""
    if config_path is None:
        config = PacksConfig.default()
    else:
        config = PacksConfig.from_yaml(config_path)
    return IconResolver.from_config(config)


def _fail(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


def parse_settings(values: list[str]) -> dict:
    """Parse ``key=value`` pairs; values are read as YAML scalars."""
    settings = {}
    for item in values:
        if "=" not in item:
            raise typer.BadParameter(f"Expected key=value, got '{item}'")
        key, raw = item.split("=", 1)
        try:
            settings[key.strip()] = yaml.safe_load(raw)
        except yaml.YAMLError:
            settings[key.strip()] = raw
    return settings


@app.callback()
def callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a packs.yaml file (default: packaged packs)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Icon packs - list, search and resolve pack_id:icon_id references."""
    configure_logging(verbose)
    ctx.obj = {"config": config}


def _resolver(ctx: typer.Context) -> IconResolver:
    try:
        resolver = load_resolver(ctx.obj["config"])
    except (IconPackError, OSError) as e:
        _fail(e)
    ctx.call_on_close(resolver.close)
    return resolver


@app.command(name="packs")
def packs_cmd(ctx: typer.Context) -> None:
    """List registered icon packs with their icon counts."""
    resolver = _resolver(ctx)

    table = Table(title="Icon packs", show_lines=True)
    table.add_column("ID", style="cyan")
    table.add_column("Label")
    table.add_column("Extractor")
    table.add_column("Enabled")
    table.add_column("Icons", justify="right")

    for pack in resolver.registry.all():
        count = "-"
        if pack.enabled:
            count = str(len(resolver.list_icons([pack.pack_id])))
        table.add_row(
            pack.pack_id,
            pack.label,
            pack.extractor_type,
            "[green]yes[/green]" if pack.enabled else "[dim]no[/dim]",
            count,
        )
    console.print(table)


@app.command(name="icons")
def icons_cmd(
    ctx: typer.Context,
    pack: Optional[list[str]] = typer.Option(
        None, "--pack", "-p", help="Only list icons of this pack (repeatable)"
    ),
) -> None:
    """List discovered icons."""
    resolver = _resolver(ctx)
    icons = resolver.list_icons(pack or None)
    if not icons:
        console.print("[yellow]No icons found.[/yellow]")
        return

    table = Table(title=f"Icons ({len(icons)})")
    table.add_column("ID", style="cyan")
    table.add_column("Label")
    table.add_column("Group")
    table.add_column("Source", style="dim")
    for full_id, icon in icons.items():
        table.add_row(full_id, icon.label, icon.group, icon.source or "")
    console.print(table)


@app.command(name="resolve")
def resolve_cmd(
    ctx: typer.Context,
    identifier: str = typer.Argument(..., help="Icon reference, e.g. builtin:home"),
    set_values: Optional[list[str]] = typer.Option(
        None, "--set", "-s", help="Template setting as key=value (repeatable)"
    ),
) -> None:
    """Resolve an icon into its template, context and asset reference."""
    settings = parse_settings(set_values or [])
    resolver = _resolver(ctx)
    try:
        renderable = resolver.resolve(identifier, settings)
    except IconPackError as e:
        _fail(e)
    console.print_json(json.dumps(renderable.to_dict(), default=str))


@app.command(name="search")
def search_cmd(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Keywords or an exact pack:icon id"),
    limit: int = typer.Option(SEARCH_MAX_RESULT, "--limit", "-n", help="Maximum results"),
    pack: Optional[list[str]] = typer.Option(
        None, "--pack", "-p", help="Only search this pack (repeatable)"
    ),
) -> None:
    """Search icons by id, pack, group or label."""
    resolver = _resolver(ctx)
    results = IconSearcher(resolver.list_icons(pack or None)).search(query, limit=limit)
    if not results:
        console.print(f"[yellow]No icons matching '{escape(query)}'.[/yellow]")
        return
    for icon in results:
        console.print(f"[cyan]{icon.full_id}[/cyan]  {escape(icon.label)}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
