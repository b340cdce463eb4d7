"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from chartmuseum_sync.models.chart import DiffResult
from chartmuseum_sync.models.report import SyncReport
from chartmuseum_sync.utils.version_compare import sort_versions

console = Console()


def _report_to_dict(report: SyncReport) -> dict[str, Any]:
    return {
        "source": report.source,
        "destination": report.destination,
        "summary": report.summary,
        "synced": report.synced,
        "failures": [
            {
                "chart": f.chart,
                "version": f.version,
                "server": f.server,
                "stage": f.stage.value,
                "cause": f.cause,
            }
            for f in report.failures
        ],
    }


def _diff_to_dict(diff: DiffResult) -> dict[str, list[str]]:
    return {chart: sort_versions(diff[chart]) for chart in sorted(diff)}


def output_report(report: SyncReport, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_report_to_dict(report), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(_report_to_dict(report), default_flow_style=False), markup=False)
    else:
        from chartmuseum_sync.output.tables import failure_table, report_panel
        console.print(report_panel(report))
        if report.failures:
            console.print(failure_table(report))


def output_diff(diff: DiffResult, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_diff_to_dict(diff), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(_diff_to_dict(diff), default_flow_style=False), markup=False)
    elif not diff:
        console.print("[green]Destination already has every source chart version[/green]")
    else:
        from chartmuseum_sync.output.tables import diff_table
        console.print(diff_table(diff))
