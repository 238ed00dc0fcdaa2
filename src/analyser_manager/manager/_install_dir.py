"""InstallDirectory: the on-disk layout of installed analysers."""

from __future__ import annotations

import json
import logging
import os
import shutil
from pathlib import Path

from ..errors import DirectoryCreateError, RootCreateError, RootUnwritableError
from ..loaders.config import CONFIG_FILE, load_plugin_config
from ..models.registry import PluginConfig
from ..versions import is_valid, latest_of

logger = logging.getLogger(__name__)


def _dir_name(name: str, version: str) -> str:
    return f"{name}@{version}"


class InstallDirectory:
    """Owns ``{root}/{name}@{version}`` directories and their config.json.

    Version metadata is encoded in directory names; nothing outside this class
    parses them.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def ensure_root(self) -> None:
        """Create the root if missing, then check it is writable."""
        if not self.root.is_dir():
            logger.info("Creating analyser install dir %s", self.root)
            try:
                self.root.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise RootCreateError(self.root) from e
        if not os.access(self.root, os.W_OK):
            raise RootUnwritableError(self.root)

    def path_for(self, name: str, version: str) -> Path:
        return self.root / _dir_name(name, version)

    def exists(self, name: str, version: str) -> bool:
        return self.path_for(name, version).is_dir()

    def create(self, name: str, version: str) -> Path:
        path = self.path_for(name, version)
        try:
            path.mkdir()
        except OSError as e:
            raise DirectoryCreateError(name, path) from e
        return path

    def remove(self, name: str, version: str) -> None:
        path = self.path_for(name, version)
        if path.is_dir():
            logger.info("Removing %s", path)
            shutil.rmtree(path)

    def read_config(self, directory: Path) -> PluginConfig:
        return load_plugin_config(directory)

    def write_config(self, directory: Path, config: PluginConfig) -> None:
        (directory / CONFIG_FILE).write_text(
            json.dumps(config.model_dump(by_alias=True, exclude_unset=True), indent=2),
            encoding="utf-8",
        )

    def list_installed_versions(self, name: str) -> set[str]:
        prefix = f"{name}@"
        return {
            dir_name[len(prefix):]
            for dir_name in self._subdirectory_names()
            if dir_name.startswith(prefix) and is_valid(dir_name[len(prefix):])
        }

    def latest_installed_version(self, name: str) -> str | None:
        return latest_of(self.list_installed_versions(name))

    def list_all_installed_plugins(self) -> list[str]:
        return sorted(n for n in self._subdirectory_names() if "@" in n)

    def _subdirectory_names(self) -> list[str]:
        if not self.root.is_dir():
            return []
        return [p.name for p in self.root.iterdir() if p.is_dir()]
