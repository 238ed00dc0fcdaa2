from .registry import PackageDist, PackageInfo, PackageVersion, PluginConfig, RegistryEntry
from .repo_config import AnalyserSpec
from .state import InstalledAnalyser, InstallEvent, Stage, VersionCheck

__all__ = [
    "AnalyserSpec",
    "InstallEvent",
    "InstalledAnalyser",
    "PackageDist",
    "PackageInfo",
    "PackageVersion",
    "PluginConfig",
    "RegistryEntry",
    "Stage",
    "VersionCheck",
]
