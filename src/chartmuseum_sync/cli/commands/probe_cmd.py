"""cm-sync probe - Check that both servers speak the ChartMuseum API."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from chartmuseum_sync.cli.options import DestinationOption, SourceOption
from chartmuseum_sync.cli.session import open_session

app = typer.Typer()
console = Console()


@app.callback(invoke_without_command=True)
def probe(
    source: Optional[str] = SourceOption,
    destination: Optional[str] = DestinationOption,
) -> None:
    """Probe the info endpoint of the source and destination servers."""
    with open_session(source, destination) as (src, dst, src_version, dst_version):
        console.print(f"[green]source[/green]       {escape(src.base_url)} (ChartMuseum {escape(src_version)})")
        console.print(f"[green]destination[/green]  {escape(dst.base_url)} (ChartMuseum {escape(dst_version)})")
