"""Protocols (ports) for the analyser manager."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models.registry import PackageInfo, RegistryEntry
    from ..models.state import InstallEvent


class PluginRegistry(Protocol):
    """The central list of analysers known to the product."""

    def fetch_plugin_list(self) -> dict[str, RegistryEntry]: ...


class PackageRegistry(Protocol):
    """A package registry backend (npm and compatible) hosting analyser tarballs."""

    def fetch_package_info(self, name: str) -> PackageInfo: ...
    def get_latest_version(self, name: str) -> str: ...
    def download(self, url: str, dest: Path) -> None: ...


class HookRunner(Protocol):
    """Runs an unpacked analyser's install script. Raises InstallHookError on failure."""

    def __call__(self, directory: Path) -> None: ...


class EventCallback(Protocol):
    def __call__(self, event: InstallEvent) -> None: ...
