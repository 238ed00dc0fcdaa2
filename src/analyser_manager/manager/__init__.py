"""Analyser management API: fetch, install, versions, repo config."""

from __future__ import annotations

from pathlib import Path
from typing import cast

from ..fetchers import NPM_REGISTRY_URL, PLUGIN_LIST_URL, HttpPluginRegistry, NpmRegistry
from ._install_dir import InstallDirectory
from ._manager import AnalyserManager
from ._protocols import (
    EventCallback,
    HookRunner,
    PackageRegistry,
    PluginRegistry,
)


def make_analyser_manager(
    install_dir: Path | None = None,
    registry_url: str = PLUGIN_LIST_URL,
    npm_registry: str = NPM_REGISTRY_URL,
    on_event: EventCallback | None = None,
) -> AnalyserManager:
    """Build an AnalyserManager backed by the HTTP plugin list and npm.

    install_dir: defaults to default_install_dir() ($ANALYSER_INSTALL_DIR or a per-OS path)

    Call ``init()`` on the result before use.
    """
    from .._location import default_install_dir

    root = Path(install_dir) if install_dir is not None else default_install_dir()
    return AnalyserManager(
        install_dir=InstallDirectory(root),
        plugin_registry=HttpPluginRegistry(registry_url),
        package_registries=cast("dict[str, PackageRegistry]", {"npm": NpmRegistry(npm_registry)}),
        on_event=on_event,
    )


__all__ = [
    "AnalyserManager",
    "EventCallback",
    "HookRunner",
    "InstallDirectory",
    "PackageRegistry",
    "PluginRegistry",
    "make_analyser_manager",
]
