"""Error taxonomy for probing, listing and transferring charts."""

from __future__ import annotations

from chartmuseum_sync.models import TransferStage


class ChartSyncError(Exception):
    """Base class for every failure raised while talking to a server."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class NetworkError(ChartSyncError):
    """The request could not be sent or no response was received."""


class UnexpectedStatus(ChartSyncError):
    def __init__(self, url: str, status_code: int, expected: int = 200):
        super().__init__(f"unexpected status code: {status_code} (expected {expected})", url)
        self.status_code = status_code
        self.expected = expected


class DecodeError(ChartSyncError):
    """The response body is not valid JSON."""


class SchemaError(ChartSyncError):
    """The decoded JSON lacks a field or has the wrong shape."""


class TransferError(ChartSyncError):
    """A single chart archive could not be copied."""

    def __init__(self, message: str, url: str, stage: TransferStage):
        super().__init__(message, url)
        self.stage = stage


class ListingError(ChartSyncError):
    """Listing charts failed on the source, the destination, or both."""

    def __init__(self, source_error: ChartSyncError | None, dest_error: ChartSyncError | None):
        parts = []
        if source_error is not None:
            parts.append(f"source: {source_error}")
        if dest_error is not None:
            parts.append(f"destination: {dest_error}")
        super().__init__("Error fetching charts: " + "; ".join(parts))
        self.source_error = source_error
        self.dest_error = dest_error
