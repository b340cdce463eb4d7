"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from chartmuseum_sync.output.formatters import console

app = typer.Typer(
    name="cm-sync",
    help="cm-sync - Copy missing Helm chart versions between ChartMuseum servers.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request"),
) -> None:
    configure_logging(verbose)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _register_commands() -> None:
    from chartmuseum_sync.cli.commands.sync_cmd import app as sync_app
    from chartmuseum_sync.cli.commands.diff_cmd import app as diff_app
    from chartmuseum_sync.cli.commands.probe_cmd import app as probe_app

    app.add_typer(sync_app, name="sync", help="Copy missing chart versions to the destination")
    app.add_typer(diff_app, name="diff", help="Show chart versions missing on the destination")
    app.add_typer(probe_app, name="probe", help="Check both servers' info endpoints")


_register_commands()


def main() -> None:
    app()
