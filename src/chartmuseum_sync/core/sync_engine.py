"""Copy chart versions missing on a destination ChartMuseum from a source."""

from __future__ import annotations

import logging
from typing import Callable

from chartmuseum_sync.core.chart_diff import count_pending, diff_indexes, iter_pending
from chartmuseum_sync.core.errors import ChartSyncError, ListingError, TransferError
from chartmuseum_sync.core.museum_client import MuseumClient
from chartmuseum_sync.models.chart import ChartIndex, DiffResult, chart_label
from chartmuseum_sync.models.report import SyncReport, TransferFailure

logger = logging.getLogger(__name__)

# (synced so far, total pending, label of the chart just synced)
ProgressCallback = Callable[[int, int, str], None]


def fetch_indexes(source: MuseumClient, destination: MuseumClient) -> tuple[ChartIndex, ChartIndex]:
    """List both servers, one after the other.

    Raises ListingError carrying both failures when either listing fails.
    """
    source_index: ChartIndex | None = None
    dest_index: ChartIndex | None = None
    source_error: ChartSyncError | None = None
    dest_error: ChartSyncError | None = None

    try:
        source_index = source.list_charts()
    except ChartSyncError as exc:
        source_error = exc
    try:
        dest_index = destination.list_charts()
    except ChartSyncError as exc:
        dest_error = exc

    if source_index is None or dest_index is None:
        raise ListingError(source_error, dest_error)
    return source_index, dest_index


def compute_diff(source: MuseumClient, destination: MuseumClient) -> DiffResult:
    source_index, dest_index = fetch_indexes(source, destination)
    return diff_indexes(source_index, dest_index)


def sync_charts(
    source: MuseumClient,
    destination: MuseumClient,
    on_progress: ProgressCallback | None = None,
) -> SyncReport:
    """Upload every chart version the destination lacks.

    A failed item is logged and recorded in the report; the remaining
    items are still attempted.
    """
    diff = compute_diff(source, destination)
    total = count_pending(diff)
    report = SyncReport(source=source.base_url, destination=destination.base_url, total=total)
    logger.info("%d chart version(s) to sync from %s to %s", total, source.base_url, destination.base_url)

    if on_progress:
        on_progress(0, total, "")

    for chart, version in iter_pending(diff):
        label = chart_label(chart, version)
        try:
            content = source.fetch_archive(chart, version)
        except TransferError as exc:
            _record_failure(report, chart, version, source.base_url, exc)
            continue

        try:
            destination.upload_archive(content)
        except TransferError as exc:
            _record_failure(report, chart, version, destination.base_url, exc)
            continue

        report.synced.append(label)
        logger.debug("Synced %s to %s", label, destination.base_url)
        if on_progress:
            on_progress(report.synced_count, total, label)

    return report


def _record_failure(
    report: SyncReport,
    chart: str,
    version: str,
    server: str,
    exc: TransferError,
) -> None:
    logger.warning(
        "Failed to %s %s-%s (%s): %s", exc.stage.value, chart, version, server, exc,
    )
    report.failures.append(TransferFailure(
        chart=chart,
        version=version,
        server=server,
        stage=exc.stage,
        cause=str(exc),
    ))
