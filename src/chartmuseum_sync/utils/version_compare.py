"""Version ordering used to schedule transfers."""

from __future__ import annotations

from packaging.version import Version, InvalidVersion


def parse_version(v: str) -> Version | None:
    """Parse a version string, returning None on failure."""
    try:
        return Version(v)
    except InvalidVersion:
        # Try stripping leading 'v'
        if v.startswith("v"):
            try:
                return Version(v[1:])
            except InvalidVersion:
                pass
    return None


def sort_versions(versions: list[str]) -> list[str]:
    """Order versions oldest first.

    Parseable versions come first in ascending order; anything packaging
    cannot parse follows in its original order. Duplicates are kept.
    """
    parsed: list[tuple[Version, int, str]] = []
    unparsed: list[str] = []
    for i, v in enumerate(versions):
        pv = parse_version(v)
        if pv is None:
            unparsed.append(v)
        else:
            parsed.append((pv, i, v))
    parsed.sort(key=lambda item: (item[0], item[1]))
    return [v for _, _, v in parsed] + unparsed
