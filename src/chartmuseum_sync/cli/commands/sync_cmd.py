"""cm-sync sync - Copy missing chart versions to the destination."""

from __future__ import annotations

from typing import Optional

import typer
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from chartmuseum_sync.cli.options import DestinationOption, OutputOption, SourceOption
from chartmuseum_sync.cli.session import open_session
from chartmuseum_sync.core.errors import ListingError
from chartmuseum_sync.core.sync_engine import sync_charts
from chartmuseum_sync.output.formatters import console, output_report

app = typer.Typer()


@app.callback(invoke_without_command=True)
def sync(
    source: Optional[str] = SourceOption,
    destination: Optional[str] = DestinationOption,
    output: str = OutputOption,
) -> None:
    """Upload every source chart version the destination is missing."""
    with open_session(source, destination) as (src, dst, _, _):
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold cyan]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console,
        )
        with progress:
            task = progress.add_task("Syncing Charts", total=None)

            def on_progress(done: int, total: int, label: str) -> None:
                description = f"Syncing Charts {escape(label)}" if label else "Syncing Charts"
                progress.update(task, total=total, completed=done, description=description)

            try:
                report = sync_charts(src, dst, on_progress=on_progress)
            except ListingError as exc:
                progress.stop()
                console.print(f"[red]{escape(str(exc))}[/red]")
                raise typer.Exit(code=1)

    output_report(report, output)
