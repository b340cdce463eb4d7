"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _default_server_url() -> str:
    return os.environ.get("CM_SYNC_DEFAULT_URL", "") or "http://localhost:8080"


def _default_http_timeout() -> float | None:
    """Return the HTTP timeout in seconds, or None to block indefinitely.

    Reads CM_SYNC_HTTP_TIMEOUT; an unset, empty or non-positive value means
    requests never time out.
    """
    raw = os.environ.get("CM_SYNC_HTTP_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass
class Settings:
    default_url: str = field(default_factory=_default_server_url)
    http_timeout: float | None = field(default_factory=_default_http_timeout)
    info_path: str = "/info"
    charts_api_path: str = "/api/charts"
    archive_path_template: str = "/charts/{chart}-{version}.tgz"
    archive_content_type: str = "application/gzip"
    default_output: str = "table"

    def archive_path(self, chart: str, version: str) -> str:
        return self.archive_path_template.format(chart=chart, version=version)


# Global singleton
settings = Settings()
