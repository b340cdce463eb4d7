"""One-directional comparison of two chart indexes."""

from __future__ import annotations

from collections.abc import Iterator

from chartmuseum_sync.models.chart import ChartIndex, DiffResult
from chartmuseum_sync.utils.version_compare import sort_versions


def diff_indexes(source: ChartIndex, destination: ChartIndex) -> DiffResult:
    """Return the versions present in ``source`` but missing from ``destination``.

    Versions are matched per chart by exact string equality. Charts that
    only exist on the destination never show up, and charts with nothing
    missing are left out of the result. A version the source lists more
    than once is reported once.
    """
    diff: DiffResult = {}
    for chart, records in source.items():
        present = {r.version for r in destination.get(chart, [])}
        missing: list[str] = []
        for r in records:
            if r.version not in present:
                missing.append(r.version)
                # a version listed twice on the source is copied once, unlike a
                # plain per-record diff that would report every occurrence
                present.add(r.version)
        if missing:
            diff[chart] = missing
    return diff


def count_pending(diff: DiffResult) -> int:
    return sum(len(versions) for versions in diff.values())


def iter_pending(diff: DiffResult) -> Iterator[tuple[str, str]]:
    """Yield every (chart, version) pair of a diff exactly once.

    Charts come in name order and versions oldest first.
    """
    for chart in sorted(diff):
        for version in sort_versions(diff[chart]):
            yield chart, version
