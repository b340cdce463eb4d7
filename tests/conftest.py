from collections.abc import Iterator
from typing import Any

import httpx
import pytest

from chartmuseum_sync.core.museum_client import MuseumClient

SOURCE = "http://source.museum.test"
DEST = "http://dest.museum.test"


def listing(*versions: str, name: str = "app") -> list[dict[str, Any]]:
    """Build the version entries ChartMuseum returns for one chart."""
    return [
        {
            "name": name,
            "version": v,
            "apiVersion": "v2",
            "urls": [f"charts/{name}-{v}.tgz"],
            "digest": "0" * 64,
        }
        for v in versions
    ]


@pytest.fixture
def http() -> Iterator[httpx.Client]:
    with httpx.Client() as client:
        yield client


@pytest.fixture
def source(http: httpx.Client) -> MuseumClient:
    return MuseumClient(SOURCE, http)


@pytest.fixture
def destination(http: httpx.Client) -> MuseumClient:
    return MuseumClient(DEST, http)
