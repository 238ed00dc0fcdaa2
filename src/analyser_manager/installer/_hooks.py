from __future__ import annotations

import logging
import subprocess
import sys
from typing import TYPE_CHECKING

from ..errors import InstallHookError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def install_command() -> list[str]:
    if sys.platform == "win32":
        return ["cmd", "/c", "bin\\install.cmd"]
    return ["./bin/install"]


def run_post_install_hook(directory: Path) -> None:
    """Run the analyser's bin/install script from inside ``directory``."""
    cmd = install_command()
    logger.debug("Running %s in %s", " ".join(cmd), directory)
    try:
        result = subprocess.run(cmd, cwd=directory, capture_output=True, text=True)
    except OSError as e:
        raise InstallHookError(
            f"Unable to run install script in {directory}: {e}", path=directory
        ) from e
    if result.returncode != 0:
        raise InstallHookError(
            f"Install script failed in {directory} (exit {result.returncode}): "
            f"{result.stderr.strip()}",
            path=directory,
            returncode=result.returncode,
        )
