from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..errors import RegistryUnavailableError
from ..models.registry import PackageInfo
from ._http import download, fetch_json

if TYPE_CHECKING:
    from pathlib import Path

NPM_REGISTRY_URL = "https://registry.npmjs.org"


class NpmRegistry:
    """Package metadata and tarballs from an npm-compatible registry."""

    def __init__(self, base_url: str = NPM_REGISTRY_URL) -> None:
        self.base_url = base_url.rstrip("/")

    def package_url(self, name: str) -> str:
        return f"{self.base_url}/{name}"

    def fetch_package_info(self, name: str) -> PackageInfo:
        url = self.package_url(name)
        data = fetch_json(url)
        try:
            return PackageInfo.model_validate(data)
        except ValidationError as e:
            raise RegistryUnavailableError(
                f"Unable to fetch analyser info for '{name}': {e}", url=url
            ) from e

    def get_latest_version(self, name: str) -> str:
        info = self.fetch_package_info(name)
        latest = info.dist_tags.get("latest")
        if latest is None:
            raise RegistryUnavailableError(
                f"No 'latest' dist-tag for analyser '{name}'", url=self.package_url(name)
            )
        return latest

    def download(self, url: str, dest: Path) -> None:
        download(url, dest)
