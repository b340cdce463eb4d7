"""Rich table builders for each command."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from chartmuseum_sync.models.chart import DiffResult
from chartmuseum_sync.models.report import SyncReport
from chartmuseum_sync.output.themes import styled_count, styled_stage
from chartmuseum_sync.utils.version_compare import sort_versions


def diff_table(diff: DiffResult) -> Table:
    table = Table(title="Missing Chart Versions", expand=True)
    table.add_column("Chart", style="magenta", no_wrap=True)
    table.add_column("Count", justify="right", style="bold")
    table.add_column("Versions", style="cyan")

    for chart in sorted(diff):
        versions = sort_versions(diff[chart])
        table.add_row(escape(chart), str(len(versions)), escape(", ".join(versions)))
    return table


def report_panel(report: SyncReport) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Source", escape(report.source))
    table.add_row("Destination", escape(report.destination))
    table.add_row("Pending", str(report.total))
    table.add_row("Synced", styled_count(report.synced_count, "green"))
    table.add_row("Failed", styled_count(report.failed_count, "red bold"))

    border = "red" if report.failures else "green"
    return Panel(table, title="[bold]Sync Summary[/bold]", border_style=border)


def failure_table(report: SyncReport) -> Table:
    table = Table(title="Failed Transfers", expand=True)
    table.add_column("Chart", style="magenta", no_wrap=True)
    table.add_column("Stage", no_wrap=True)
    table.add_column("Server", style="dim")
    table.add_column("Cause", max_width=60)

    for f in report.failures:
        table.add_row(escape(f.label), styled_stage(f.stage), escape(f.server), escape(f.cause))
    return table
