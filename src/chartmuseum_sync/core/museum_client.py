"""ChartMuseum HTTP API wrapper."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from chartmuseum_sync.config.settings import settings
from chartmuseum_sync.core.errors import (
    DecodeError,
    NetworkError,
    SchemaError,
    TransferError,
    UnexpectedStatus,
)
from chartmuseum_sync.models import TransferStage
from chartmuseum_sync.models.chart import ChartIndex, ChartVersion

logger = logging.getLogger(__name__)


class MuseumClient:
    """Thin wrapper around httpx for one ChartMuseum server.

    The underlying ``httpx.Client`` may be shared between several
    MuseumClient instances; it is only closed here when this instance
    created it.
    """

    def __init__(self, base_url: str, http: httpx.Client | None = None):
        self.base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(timeout=settings.http_timeout)

    def __enter__(self) -> MuseumClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    @property
    def info_url(self) -> str:
        return self.base_url + settings.info_path

    @property
    def charts_url(self) -> str:
        return self.base_url + settings.charts_api_path

    def archive_url(self, chart: str, version: str) -> str:
        return self.base_url + settings.archive_path(chart, version)

    # ------------------------------------------------------------------
    # JSON endpoints
    # ------------------------------------------------------------------

    def _get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        try:
            response = self._http.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkError(f"error making request: {exc}", url) from exc

        if response.status_code != httpx.codes.OK:
            raise UnexpectedStatus(url, response.status_code)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"error decoding JSON: {exc}", url) from exc

    def probe(self) -> str:
        """Check that the server answers its info endpoint like a ChartMuseum.

        Returns the advertised server version.
        """
        url = self.info_url
        data = self._get_json(url)
        if not isinstance(data, dict) or "version" not in data:
            raise SchemaError("missing 'version' key in JSON", url)
        return str(data["version"])

    def list_charts(self) -> ChartIndex:
        """Fetch every chart and its version records from the server."""
        url = self.charts_url
        data = self._get_json(url)
        if not isinstance(data, dict):
            raise SchemaError("chart listing is not a JSON object", url)

        index: ChartIndex = {}
        for chart_name, entries in data.items():
            if not isinstance(entries, list):
                raise SchemaError(f"versions of chart '{chart_name}' are not a list", url)
            records: list[ChartVersion] = []
            for entry in entries:
                record = ChartVersion.from_dict(entry) if isinstance(entry, dict) else None
                if record is None:
                    logger.debug("Skipping %s entry without a version: %r", chart_name, entry)
                    continue
                records.append(record)
            index[chart_name] = records
        return index

    # ------------------------------------------------------------------
    # Archives
    # ------------------------------------------------------------------

    def fetch_archive(self, chart: str, version: str) -> bytes:
        url = self.archive_url(chart, version)
        logger.debug("GET %s", url)
        try:
            with self._http.stream("GET", url) as response:
                if response.status_code != httpx.codes.OK:
                    raise TransferError(
                        f"unexpected status code: {response.status_code}", url, TransferStage.FETCH,
                    )
                try:
                    return response.read()
                except httpx.HTTPError as exc:
                    raise TransferError(f"error reading body: {exc}", url, TransferStage.READ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransferError(f"error making request: {exc}", url, TransferStage.FETCH) from exc

    def upload_archive(self, content: bytes) -> None:
        url = self.charts_url
        logger.debug("POST %s (%d bytes)", url, len(content))
        try:
            response = self._http.post(
                url,
                content=content,
                headers={"Content-Type": settings.archive_content_type},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransferError(f"error making request: {exc}", url, TransferStage.UPLOAD) from exc

        if response.status_code != httpx.codes.CREATED:
            raise TransferError(
                f"unexpected status code: {response.status_code} {response.text[:200]}".rstrip(),
                url,
                TransferStage.UPLOAD,
            )
