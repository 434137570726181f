"""Command line interface for inspecting icons, colour schemes and byte counts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from iconworks.art.catalog import get_colorscheme, get_icon, load_colorschemes, load_icons
from iconworks.art.colors import AnsiColor, Color, NamedColor, color_to_json
from iconworks.bytecount import format_bytecount
from iconworks.config import load_settings
from iconworks.errors import IconworksError
from iconworks.logging_utils import configure_cli_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="iconworks",
    help="Inspect coloured ASCII-art icons, colour schemes and byte counts.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _describe_color(color: Color) -> str:
    if isinstance(color, NamedColor):
        return color.value
    if isinstance(color, AnsiColor):
        return f"ansi({color.value})"
    return color.hex


def _fail(exc: IconworksError) -> NoReturn:
    logger.error("%s", exc)
    err_console.print(Text(f"❌ {exc}", style="red"), soft_wrap=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    icons_path: Optional[Path] = typer.Option(
        None, "--icons-path", help="Icons YAML file to use instead of the bundled one."
    ),
    flags_path: Optional[Path] = typer.Option(
        None, "--flags-path", help="Colour-scheme TOML file to use instead of the bundled one."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Echo debug logging to the console."
    ),
) -> None:
    settings = load_settings()
    log_path = configure_cli_logging(verbose)
    logger.debug("iconworks logging initialised → %s", log_path)
    ctx.obj = SimpleNamespace(
        settings=settings,
        icons_path=icons_path or settings.icons_path,
        flags_path=flags_path or settings.flags_path,
    )


@app.command("icons")
def list_icons(ctx: typer.Context) -> None:
    """List every icon in the catalog."""
    state = ctx.obj
    try:
        icons = load_icons(state.icons_path)
    except IconworksError as exc:
        _fail(exc)

    table = Table(title="Icons")
    table.add_column("Names", style="cyan")
    table.add_column("Width", justify="right")
    table.add_column("Height", justify="right")
    table.add_column("Colours", justify="right")
    table.add_column("Segments", justify="right")
    for icon in icons:
        table.add_row(
            Text(", ".join(icon.names)),
            str(icon.width),
            str(icon.height),
            str(len(icon.palette)),
            str(len(icon.segments)),
        )
    console.print(table)


@app.command("show")
def show_icon(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Icon name or alias (any case)."),
    json_output: bool = typer.Option(False, "--json", help="Emit the transcoded icon as JSON."),
) -> None:
    """Show the transcoded structure of one icon."""
    state = ctx.obj
    try:
        icon = get_icon(name, path=state.icons_path)
    except IconworksError as exc:
        _fail(exc)

    if json_output:
        typer.echo(json.dumps(icon.to_dict(), indent=2))
        return

    console.print(
        Text(
            f"{', '.join(icon.names)}: {icon.width}x{icon.height}, "
            f"{len(icon.segments)} segments"
        )
    )
    table = Table(title="Segments")
    table.add_column("#", justify="right")
    table.add_column("Colour")
    table.add_column("Text", overflow="fold")
    for segment in icon.segments:
        if segment.palette_index < len(icon.palette):
            colour = f"{segment.palette_index} ({_describe_color(icon.palette[segment.palette_index])})"
        else:
            colour = f"{segment.palette_index} (not in palette)"
        table.add_row(
            str(segment.palette_index),
            Text(colour),
            Text(segment.text.replace("\n", "\\n")),
        )
    console.print(table)


@app.command("schemes")
def list_schemes(ctx: typer.Context) -> None:
    """List the available colour schemes."""
    try:
        schemes = load_colorschemes(ctx.obj.flags_path)
    except IconworksError as exc:
        _fail(exc)

    table = Table(title="Colour Schemes")
    table.add_column("Name", style="cyan")
    table.add_column("Colours")
    for name, colours in sorted(schemes.items()):
        table.add_row(Text(name), Text(" ".join(colour.hex for colour in colours)))
    console.print(table)


@app.command("scheme")
def show_scheme(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Colour scheme name."),
    json_output: bool = typer.Option(False, "--json", help="Emit the RGB triples as JSON."),
) -> None:
    """Show the colours of one scheme."""
    try:
        colours = get_colorscheme(name, path=ctx.obj.flags_path)
    except IconworksError as exc:
        _fail(exc)

    if json_output:
        typer.echo(json.dumps([color_to_json(colour) for colour in colours]))
        return

    table = Table(title=f"Colour scheme: {name}")
    table.add_column("#", justify="right")
    table.add_column("RGB")
    table.add_column("Hex")
    for position, colour in enumerate(colours):
        table.add_row(
            str(position),
            ", ".join(str(part) for part in colour.as_tuple()),
            Text(colour.hex, style=colour.hex),
        )
    console.print(table)


@app.command("size")
def size(
    ctx: typer.Context,
    magnitude: int = typer.Argument(..., min=0, help="Number of bytes."),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=0, help="Fractional digits (defaults to project setting)."
    ),
) -> None:
    """Format a byte count with binary units."""
    if precision is None:
        precision = ctx.obj.settings.default_precision
    try:
        formatted = format_bytecount(magnitude, precision)
    except IconworksError as exc:
        _fail(exc)
    typer.echo(formatted)


if __name__ == "__main__":  # pragma: no cover
    app()
