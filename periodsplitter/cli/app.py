"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.table import Table

from ..config import AppConfig, load_config
from ..domain.models import PeriodKind
from ..domain.period_splitter import PeriodSplitter
from ..services.period_slicing import PeriodSlicingService

app = typer.Typer(
    name="periodsplitter",
    help="Split a time range into calendar-aligned periods",
    add_completion=False
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def _build_service(config: AppConfig, tz: Optional[str]) -> PeriodSlicingService:
    """Create the slicing service, honouring a --tz override."""
    if tz:
        config = AppConfig(**{**config.model_dump(), "timezone": tz})
    return PeriodSlicingService(
        config=config,
        splitter=PeriodSplitter(timezone=config.timezone)
    )


@app.command()
def split(
    start: Annotated[str, typer.Option("--start", "-s", help="Range start (YYYY-MM-DD or ISO-8601)")],
    end: Annotated[str, typer.Option("--end", "-e", help="Range end (YYYY-MM-DD or ISO-8601)")],
    kind: Annotated[Optional[str], typer.Argument(help="Period kind: daily, workday, weekend, weekly, monthly, yearly")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    tz: Annotated[Optional[str], typer.Option("--tz", help="Reference timezone, overrides the config")] = None,
    millis: Annotated[bool, typer.Option("--millis", help="Print epoch-millisecond pairs instead of a table.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Split a time range into calendar-aligned slices.

    Examples:

        periodsplitter split workday --start 2024-06-24 --end 2024-06-30

        periodsplitter split monthly -s 2024-01-15 -e 2024-03-10 --millis

        periodsplitter split weekly -s 2024-06-05 -e 2024-06-19 --tz Europe/Berlin
    """
    _configure_logging(verbose)

    try:
        config = load_config(config_file)
        service = _build_service(config, tz)

        period = PeriodKind.parse(kind) if kind is not None else config.default_period
        slices = service.split_dates(period, start, end)
    except (FileNotFoundError, ValueError) as e:
        # InvalidArgumentError and pydantic's ValidationError are ValueErrors
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if millis:
        for piece in slices:
            slice_start, slice_end = piece.to_millis()
            console.print(f"{slice_start} {slice_end}")
        return

    if not slices:
        console.print(f"[yellow]⚠ No slices ({period.label}) fit into the given range.[/yellow]")
        return

    table = Table(
        title=f"{len(slices)} slice(s), {period.label} ({service.timezone})",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Start", style="bold yellow")
    table.add_column("End")

    for idx, piece in enumerate(slices, 1):
        table.add_row(
            str(idx),
            piece.start.format(config.display_format),
            piece.end.format(config.display_format)
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def kinds():
    """
    List the supported period kinds.
    """
    table = Table(
        title="Period kinds",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Kind", style="bold yellow")
    table.add_column("Label", style="dim")

    for kind in PeriodKind:
        table.add_row(kind.value, kind.label)

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]periodsplitter[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
