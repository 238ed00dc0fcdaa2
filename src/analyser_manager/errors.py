from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class AnalyserManagerError(Exception):
    """Base class for every error raised by analyser_manager."""


class RegistryUnavailableError(AnalyserManagerError):
    """Raised when the plugin list or package metadata cannot be fetched.

    Covers network failures, non-2xx responses and bodies that are not valid
    JSON (comments allowed).

    Attributes:
        url: The URL that failed.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class UnknownPluginError(AnalyserManagerError):
    """Raised when a name is not in the central plugin list."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown analyser: {name}")


class UnsupportedRegistryError(AnalyserManagerError):
    """Raised when a plugin is hosted on a package registry we cannot install from."""

    def __init__(self, name: str, registry: str) -> None:
        self.name = name
        self.registry = registry
        super().__init__(f"Unsupported registry '{registry}' for analyser: {name}")


class VersionNotFoundError(AnalyserManagerError):
    """Raised when the package registry does not publish the requested version."""

    def __init__(self, name: str, version: str) -> None:
        self.name = name
        self.version = version
        super().__init__(
            f"Invalid version for analyser '{name}'. Registry does not have version '{version}'"
        )


class InvalidVersionError(AnalyserManagerError):
    """Raised when a version string is not a valid semantic version."""

    def __init__(self, version: str, name: str | None = None) -> None:
        self.version = version
        self.name = name
        msg = f"Invalid semantic version: {version!r}"
        if name:
            msg += f" (analyser: {name})"
        super().__init__(msg)


class DirectoryCreateError(AnalyserManagerError):
    """Raised when an analyser version directory cannot be created."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Unable to create analyser dir for analyser '{name}': {path}")


class DownloadError(AnalyserManagerError):
    """Raised when a tarball download fails.

    Attributes:
        url: The tarball URL.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class ExtractError(AnalyserManagerError):
    """Raised when a downloaded tarball cannot be unpacked."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class InstallHookError(AnalyserManagerError):
    """Raised when an analyser's own install script fails or cannot be spawned.

    The partially installed directory is left on disk.
    """

    def __init__(self, message: str, path: Path, returncode: int | None = None) -> None:
        self.path = path
        self.returncode = returncode
        super().__init__(message)


class RootCreateError(AnalyserManagerError):
    """Raised when the install root is missing and cannot be created."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Unable to create analyser install dir: {path}")


class RootUnwritableError(AnalyserManagerError):
    """Raised when the install root exists but is not writable."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Analyser install dir is not writable: {path}")


class ConfigReadError(AnalyserManagerError):
    """Raised when a config file is missing or unreadable."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ConfigParseError(AnalyserManagerError):
    """Raised when a config file is not valid JSON (comments allowed)."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class AnalyserFetchError(AnalyserManagerError):
    """Raised when fetching an analyser that is not installed locally."""

    def __init__(self, name: str, version: str) -> None:
        self.name = name
        self.version = version
        super().__init__(f"Analyser not installed: {name}@{version}")


class InvalidAnalyserSpecError(AnalyserManagerError):
    """Raised when an analyser reference has no usable name or malformed options."""

    def __init__(self, spec: object, reason: str) -> None:
        self.spec = spec
        super().__init__(f"Invalid analyser reference {spec!r}: {reason}")
