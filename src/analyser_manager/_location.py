from __future__ import annotations

import os
import sys
from pathlib import Path

INSTALL_DIR_ENV = "ANALYSER_INSTALL_DIR"


def default_install_dir() -> Path:
    """Return where analysers are installed.

    ``$ANALYSER_INSTALL_DIR`` when set, otherwise:
    %APPDATA%\\sidekick\\analysers on Windows,
    ~/Library/Application Support/sidekick/analysers on macOS,
    /var/local/sidekick/analysers on Linux.
    """
    override = os.environ.get(INSTALL_DIR_ENV)
    if override:
        return Path(override)
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", Path.home())) / "sidekick" / "analysers"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "sidekick" / "analysers"
    if sys.platform.startswith("linux"):
        return Path("/var/local/sidekick/analysers")
    raise RuntimeError(f"Unsupported os: {sys.platform}")
