"""Shared CLI options."""

from __future__ import annotations

import typer

from chartmuseum_sync.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
SourceOption = typer.Option(None, "--source", "-s", help="Source, a valid ChartMuseum URL")
DestinationOption = typer.Option(None, "--destination", "-d", help="Destination, a valid ChartMuseum URL")
