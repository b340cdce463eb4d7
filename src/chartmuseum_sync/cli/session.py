"""Endpoint resolution and probing shared by every command."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from chartmuseum_sync.config.settings import settings
from chartmuseum_sync.core.errors import ChartSyncError
from chartmuseum_sync.core.museum_client import MuseumClient

console = Console()


def print_usage_guidance() -> None:
    default = escape(settings.default_url)
    console.print("[red]You must have at least one source or one destination.[/red]")
    console.print("cm-sync sync -s http://source_url -d http://destination_url")
    console.print(f"If you omit either of them, {default} will be used instead:")
    console.print(f"  cm-sync sync -s http://source_url [dim](implies -d {default})[/dim]")
    console.print("---")
    console.print(
        "[dim]chartmuseum --storage local --storage-local-rootdir /tmp/chartmuseum/ --port 8080[/dim]"
    )


def resolve_endpoints(source: str | None, destination: str | None) -> tuple[str, str]:
    """Fill in the default URL for whichever endpoint was not given.

    Exits with status 1 when neither was given.
    """
    if source is None and destination is None:
        print_usage_guidance()
        raise typer.Exit(code=1)
    return (
        source if source is not None else settings.default_url,
        destination if destination is not None else settings.default_url,
    )


def probe_or_exit(client: MuseumClient, role: str) -> str:
    try:
        return client.probe()
    except ChartSyncError as exc:
        console.print(f"[red]Error checking {role}:[/red] {escape(client.info_url)}")
        console.print(f"  {escape(str(exc))}")
        raise typer.Exit(code=1)


@contextmanager
def open_session(
    source: str | None,
    destination: str | None,
) -> Iterator[tuple[MuseumClient, MuseumClient, str, str]]:
    """Yield probed source and destination clients plus their server versions."""
    source_url, dest_url = resolve_endpoints(source, destination)
    with httpx.Client(timeout=settings.http_timeout) as http:
        src = MuseumClient(source_url, http)
        dst = MuseumClient(dest_url, http)
        src_version = probe_or_exit(src, "source")
        dst_version = probe_or_exit(dst, "destination")
        yield src, dst, src_version, dst_version
