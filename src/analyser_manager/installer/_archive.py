"""ArchiveInstaller: download, unpack and provision one analyser version."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..loaders.config import CONFIG_FILE
from ..models.state import InstallEvent, Stage
from ..versions import resolve_version
from ._extract import extract_tarball
from ._hooks import run_post_install_hook

if TYPE_CHECKING:
    from ..manager._install_dir import InstallDirectory
    from ..manager._protocols import EventCallback, HookRunner, PackageRegistry
    from ..models.registry import PluginConfig, RegistryEntry

logger = logging.getLogger(__name__)


def tarball_name(url: str) -> str:
    # e.g. https://registry.npmjs.org/sidekick-david/-/sidekick-david-1.0.5.tgz
    return url.rsplit("/", 1)[-1] or "package.tgz"


class ArchiveInstaller:
    """Installs a concrete analyser version from a package registry.

    Holds no per-install state: every call gets the entry, the version, the
    target install directory and an optional progress callback.
    """

    def __init__(
        self,
        registry: PackageRegistry,
        hook_runner: HookRunner = run_post_install_hook,
    ) -> None:
        self._registry = registry
        self._hook_runner = hook_runner

    def install(
        self,
        entry: RegistryEntry,
        version: str,
        install_dir: InstallDirectory,
        notify: EventCallback | None = None,
    ) -> PluginConfig:
        """Download, unpack and run the install hook for ``entry`` at ``version``.

        Returns the central config from ``entry``, not the one unpacked on disk.
        A failure at any step leaves whatever was created on disk in place.
        """
        name = entry.name

        def emit(stage: Stage) -> None:
            if notify is not None:
                notify(InstallEvent(stage=stage, plugin=name, version=version))

        emit("downloading")
        info = self._registry.fetch_package_info(name)
        version = resolve_version(name, version, info)
        tarball_url = info.versions[version].dist.tarball

        target = install_dir.create(name, version)
        tarball = target / tarball_name(tarball_url)
        logger.info("Downloading %s@%s from %s", name, version, tarball_url)
        self._registry.download(tarball_url, tarball)
        emit("downloaded")

        extract_tarball(tarball, target)
        emit("installing")
        try:
            tarball.unlink()
        except OSError as e:
            logger.warning("Unable to remove tarball %s: %s", tarball, e)

        if not (target / CONFIG_FILE).exists():
            install_dir.write_config(target, entry.config)

        self._hook_runner(target)
        emit("installed")
        logger.info("Installed %s@%s into %s", name, version, target)
        return entry.config
