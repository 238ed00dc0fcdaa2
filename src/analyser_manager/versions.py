"""Semantic-version helpers: resolve a requested version, compare against latest."""

from __future__ import annotations

from collections.abc import Iterable

from semver import Version

from .errors import InvalidVersionError, VersionNotFoundError
from .models.registry import PackageInfo
from .models.state import VersionCheck

LATEST = "latest"


def is_valid(version: str | None) -> bool:
    return isinstance(version, str) and Version.is_valid(version)


def resolve_version(name: str, requested: str | None, info: PackageInfo) -> str:
    """Return the concrete version to install.

    None or "latest" expands to the registry's ``latest`` dist-tag. Any other
    value is returned unchanged once confirmed to be a published version.

    Raises:
        VersionNotFoundError: If the registry does not publish the version.
    """
    if requested is None or requested == LATEST:
        latest = info.dist_tags.get(LATEST)
        if latest is None:
            raise VersionNotFoundError(name, LATEST)
        return latest
    if requested not in info.versions:
        raise VersionNotFoundError(name, requested)
    return requested


def compare_to_latest(current: str | None, latest: str, name: str | None = None) -> VersionCheck:
    """Compare ``current`` against ``latest``.

    A garbage ``current`` is tolerated: the result carries ``latest`` only.
    Equal versions are not newer.

    Raises:
        InvalidVersionError: If ``latest`` is not a valid semantic version.
    """
    if not is_valid(latest):
        raise InvalidVersionError(latest, name=name)
    if not is_valid(current):
        return VersionCheck(latest=latest)
    return VersionCheck(latest=latest, newer=Version.parse(current) < Version.parse(latest))


def latest_of(versions: Iterable[str]) -> str | None:
    """Highest valid semantic version in ``versions``, or None."""
    valid = [v for v in versions if is_valid(v)]
    if not valid:
        return None
    return max(valid, key=Version.parse)
