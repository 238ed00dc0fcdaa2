"""AnalyserManager: fetch-or-install analysers and report install progress."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..errors import (
    AnalyserFetchError,
    InvalidAnalyserSpecError,
    UnknownPluginError,
    UnsupportedRegistryError,
)
from ..installer._archive import ArchiveInstaller
from ..installer._hooks import run_post_install_hook
from ..loaders.repo_config import get_all_analysers_for_config
from ..models.repo_config import AnalyserSpec
from ..models.state import InstalledAnalyser, InstallEvent, VersionCheck
from ..versions import LATEST, compare_to_latest

if TYPE_CHECKING:
    from ..models.registry import RegistryEntry
    from ._install_dir import InstallDirectory
    from ._protocols import EventCallback, HookRunner, PackageRegistry, PluginRegistry

logger = logging.getLogger(__name__)


def _to_spec(spec: str | AnalyserSpec | Mapping[str, Any]) -> AnalyserSpec:
    if isinstance(spec, AnalyserSpec):
        return spec
    if isinstance(spec, str):
        return AnalyserSpec(name=spec)
    if not isinstance(spec, Mapping):
        raise InvalidAnalyserSpecError(spec, "expected a name or a mapping with a name")
    try:
        return AnalyserSpec.model_validate(dict(spec))
    except ValidationError as e:
        raise InvalidAnalyserSpecError(spec, str(e)) from e


class AnalyserManager:
    """Fetches and installs analysers under one install directory.

    ``on_event`` receives every InstallEvent of the installs this manager
    runs, tagged with the analyser name. It is a progress observer only: an
    exception raised by it is logged at warning level and the install carries
    on.
    """

    def __init__(
        self,
        install_dir: InstallDirectory,
        plugin_registry: PluginRegistry,
        package_registries: dict[str, PackageRegistry],
        hook_runner: HookRunner = run_post_install_hook,
        on_event: EventCallback | None = None,
    ) -> None:
        self._install_dir = install_dir
        self._plugin_registry = plugin_registry
        self._package_registries = package_registries
        self._hook_runner = hook_runner
        self._on_event = on_event
        self._plugin_list: dict[str, RegistryEntry] | None = None

    @property
    def install_dir(self) -> InstallDirectory:
        return self._install_dir

    def init(self) -> None:
        """Prepare the install root and warm the plugin list cache."""
        self._install_dir.ensure_root()
        self.fetch_plugin_list()

    # --- registry ---

    def fetch_plugin_list(self, force: bool = False) -> dict[str, RegistryEntry]:
        if self._plugin_list is None or force:
            self._plugin_list = self._plugin_registry.fetch_plugin_list()
        else:
            logger.debug("Using cached analyser list")
        return self._plugin_list

    def fetch_canonical_config(self, name: str) -> RegistryEntry:
        entry = self.fetch_plugin_list().get(name)
        if entry is None:
            raise UnknownPluginError(name)
        return entry

    def validate_analyser_list(
        self, specs: Sequence[str | AnalyserSpec | Mapping[str, Any]]
    ) -> list[AnalyserSpec]:
        """Drop analysers the central list does not know.

        Unknown names and malformed references are dropped, not raised.
        """
        known = self.fetch_plugin_list()
        result: list[AnalyserSpec] = []
        for raw in specs:
            try:
                spec = _to_spec(raw)
            except InvalidAnalyserSpecError:
                logger.debug("Dropping malformed analyser reference %r", raw)
                continue
            if spec.name in known:
                result.append(spec)
            else:
                logger.debug("Dropping unknown analyser %s", spec.name)
        return result

    def get_all_analysers_for_config(self, repo_config: dict[str, Any]) -> list[AnalyserSpec]:
        return get_all_analysers_for_config(repo_config)

    # --- versions ---

    def is_newer_version_available(self, name: str, current: str | None = None) -> VersionCheck:
        entry = self.fetch_canonical_config(name)
        latest = self._package_registry_for(entry).get_latest_version(name)
        return compare_to_latest(current, latest, name=name)

    def get_latest_version_of_installed_analyser(self, name: str) -> str | None:
        return self._install_dir.latest_installed_version(name)

    def get_all_installed_analysers(self) -> list[str]:
        return self._install_dir.list_all_installed_plugins()

    # --- install ---

    def fetch_analyser(self, name: str, version: str) -> InstalledAnalyser:
        """Return an installed analyser. Never installs; see install_analyser."""
        if not self._install_dir.exists(name, version):
            raise AnalyserFetchError(name, version)
        path = self._install_dir.path_for(name, version)
        return InstalledAnalyser(path=path, config=self._install_dir.read_config(path))

    def install_analyser(
        self,
        spec: str | AnalyserSpec | Mapping[str, Any],
        force: bool = False,
    ) -> InstalledAnalyser:
        """Install an analyser unless that version is already on disk.

        ``spec`` is a name, an AnalyserSpec or a mapping with ``name`` and an
        optional ``version``. A missing version or "latest" is resolved against
        the package registry first. With ``force`` an existing directory is
        removed and installed afresh.
        """
        spec = _to_spec(spec)
        name = spec.name
        entry = self.fetch_canonical_config(name)
        registry = self._package_registry_for(entry)

        version = spec.version
        if version is None or version == LATEST:
            version = self.is_newer_version_available(name).latest

        path = self._install_dir.path_for(name, version)
        if self._install_dir.exists(name, version):
            if not force:
                logger.debug("%s@%s already installed", name, version)
                return InstalledAnalyser(path=path, config=self._install_dir.read_config(path))
            self._install_dir.remove(name, version)

        installer = ArchiveInstaller(registry, hook_runner=self._hook_runner)
        config = installer.install(entry, version, self._install_dir, notify=self._forward(name))
        return InstalledAnalyser(path=path, config=config)

    # --- internal helpers ---

    def _package_registry_for(self, entry: RegistryEntry) -> PackageRegistry:
        registry = self._package_registries.get(entry.registry)
        if registry is None:
            raise UnsupportedRegistryError(entry.name, entry.registry)
        return registry

    def _forward(self, name: str) -> EventCallback:
        def notify(event: InstallEvent) -> None:
            if self._on_event is None:
                return
            try:
                self._on_event(dataclasses.replace(event, analyser=name))
            except Exception:
                logger.warning("Install event callback failed for %s", name, exc_info=True)

        return notify
