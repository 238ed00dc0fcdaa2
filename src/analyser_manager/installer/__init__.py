from ._archive import ArchiveInstaller, tarball_name
from ._extract import extract_tarball
from ._hooks import install_command, run_post_install_hook

__all__ = [
    "ArchiveInstaller",
    "extract_tarball",
    "install_command",
    "run_post_install_hook",
    "tarball_name",
]
