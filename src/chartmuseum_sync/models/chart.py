"""Chart index models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ChartVersion:
    """A single version record from a ChartMuseum listing.

    Only the version string takes part in comparisons; the rest of the
    record (digest, urls, appVersion, ...) is ignored.
    """

    version: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChartVersion | None:
        version = data.get("version")
        if not isinstance(version, str):
            return None
        return cls(version=version)


# chart name -> version records, as served by GET /api/charts
ChartIndex = dict[str, list[ChartVersion]]

# chart name -> version strings missing on the destination
DiffResult = dict[str, list[str]]


def chart_label(chart: str, version: str) -> str:
    return f"{chart}-{version}"
