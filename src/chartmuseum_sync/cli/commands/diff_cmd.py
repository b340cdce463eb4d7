"""cm-sync diff - Show chart versions missing on the destination."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from chartmuseum_sync.cli.options import DestinationOption, OutputOption, SourceOption
from chartmuseum_sync.cli.session import open_session
from chartmuseum_sync.core.errors import ListingError
from chartmuseum_sync.core.sync_engine import compute_diff
from chartmuseum_sync.output.formatters import output_diff

app = typer.Typer()
console = Console()


@app.callback(invoke_without_command=True)
def diff(
    source: Optional[str] = SourceOption,
    destination: Optional[str] = DestinationOption,
    output: str = OutputOption,
) -> None:
    """List source chart versions the destination does not have, without copying."""
    with open_session(source, destination) as (src, dst, _, _):
        try:
            missing = compute_diff(src, dst)
        except ListingError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise typer.Exit(code=1)
    output_diff(missing, output)
