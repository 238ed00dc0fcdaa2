"""Install and locate analyser plugins published on an npm-compatible registry."""

from ._location import default_install_dir
from .errors import (
    AnalyserFetchError,
    AnalyserManagerError,
    ConfigParseError,
    ConfigReadError,
    DirectoryCreateError,
    DownloadError,
    ExtractError,
    InstallHookError,
    InvalidAnalyserSpecError,
    InvalidVersionError,
    RegistryUnavailableError,
    RootCreateError,
    RootUnwritableError,
    UnknownPluginError,
    UnsupportedRegistryError,
    VersionNotFoundError,
)
from .fetchers import HttpPluginRegistry, NpmRegistry
from .installer import ArchiveInstaller
from .loaders import get_all_analysers_for_config, load_plugin_config, load_repo_config
from .manager import AnalyserManager, InstallDirectory, make_analyser_manager
from .models import (
    AnalyserSpec,
    InstalledAnalyser,
    InstallEvent,
    PackageInfo,
    PluginConfig,
    RegistryEntry,
    VersionCheck,
)

__all__ = [
    "AnalyserFetchError",
    "AnalyserManager",
    "AnalyserManagerError",
    "AnalyserSpec",
    "ArchiveInstaller",
    "ConfigParseError",
    "ConfigReadError",
    "DirectoryCreateError",
    "DownloadError",
    "ExtractError",
    "HttpPluginRegistry",
    "InstallDirectory",
    "InstallEvent",
    "InstallHookError",
    "InvalidAnalyserSpecError",
    "InstalledAnalyser",
    "InvalidVersionError",
    "NpmRegistry",
    "PackageInfo",
    "PluginConfig",
    "RegistryEntry",
    "RegistryUnavailableError",
    "RootCreateError",
    "RootUnwritableError",
    "UnknownPluginError",
    "UnsupportedRegistryError",
    "VersionCheck",
    "VersionNotFoundError",
    "default_install_dir",
    "get_all_analysers_for_config",
    "load_plugin_config",
    "load_repo_config",
    "make_analyser_manager",
]
