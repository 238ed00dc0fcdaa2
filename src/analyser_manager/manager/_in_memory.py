"""In-memory registries for testing (no network I/O)."""

from __future__ import annotations

from pathlib import Path

from ..errors import DownloadError, RegistryUnavailableError
from ..models.registry import PackageInfo, PluginConfig, RegistryEntry


class InMemoryPluginRegistry:
    def __init__(self, entries: dict[str, RegistryEntry] | None = None) -> None:
        self._entries = dict(entries or {})
        self.fetch_count = 0

    def add(self, name: str, config: PluginConfig | None = None, registry: str = "npm") -> None:
        self._entries[name] = RegistryEntry(
            name=name, registry=registry, config=config or PluginConfig()
        )

    def fetch_plugin_list(self) -> dict[str, RegistryEntry]:
        self.fetch_count += 1
        return dict(self._entries)


class InMemoryPackageRegistry:
    """Serves package metadata and tarball bytes keyed by URL."""

    base_url = "https://registry.example.com"

    def __init__(self) -> None:
        self._packages: dict[str, dict] = {}
        self._tarballs: dict[str, bytes] = {}
        self.downloads: list[str] = []

    def publish(self, name: str, version: str, tarball: bytes, latest: bool = True) -> str:
        url = f"{self.base_url}/{name}/-/{name}-{version}.tgz"
        package = self._packages.setdefault(name, {"name": name, "dist-tags": {}, "versions": {}})
        package["versions"][version] = {"dist": {"tarball": url}}
        if latest:
            package["dist-tags"]["latest"] = version
        self._tarballs[url] = tarball
        return url

    def fetch_package_info(self, name: str) -> PackageInfo:
        if name not in self._packages:
            raise RegistryUnavailableError(
                f"HTTP 404 fetching {self.base_url}/{name}", url=f"{self.base_url}/{name}"
            )
        return PackageInfo.model_validate(self._packages[name])

    def get_latest_version(self, name: str) -> str:
        return self.fetch_package_info(name).dist_tags["latest"]

    def download(self, url: str, dest: Path) -> None:
        if url not in self._tarballs:
            raise DownloadError(f"HTTP 404 fetching tarball {url}", url=url)
        self.downloads.append(url)
        dest.write_bytes(self._tarballs[url])
