"""Result types handed back to callers of the analyser manager."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .registry import PluginConfig

Stage = Literal["downloading", "downloaded", "installing", "installed"]


@dataclass
class InstalledAnalyser:
    """An analyser directory on disk and its parsed config.json."""

    path: Path
    config: PluginConfig


@dataclass(frozen=True)
class VersionCheck:
    """Outcome of comparing a version against the registry's latest.

    Attributes:
        latest: Latest published version.
        newer: True if latest is strictly greater than the version checked,
            None when that version was not a valid semantic version.
    """

    latest: str
    newer: bool | None = None


@dataclass(frozen=True)
class InstallEvent:
    """A lifecycle step of one install attempt."""

    stage: Stage
    plugin: str
    version: str
    analyser: str | None = None
