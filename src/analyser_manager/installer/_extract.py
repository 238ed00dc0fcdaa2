from __future__ import annotations

import tarfile
from pathlib import Path, PurePosixPath

from ..errors import ExtractError


def extract_tarball(tarball: Path, dest: Path) -> None:
    """Unpack a gzipped tarball into ``dest``, dropping the top-level folder.

    npm tarballs wrap their contents in a single ``package/`` directory; that
    first path component is stripped from every member. Only regular files
    and directories are extracted.
    """
    try:
        with tarfile.open(tarball, "r:gz") as tar:
            members = list(_strip_top_level(tar.getmembers()))
            tar.extractall(dest, members=members, filter="data")
    except (tarfile.TarError, OSError, EOFError) as e:
        raise ExtractError(f"Unable to unpack {tarball}: {e}", path=tarball) from e


def _strip_top_level(members: list[tarfile.TarInfo]):
    for member in members:
        if not (member.isfile() or member.isdir()):
            continue
        parts = PurePosixPath(member.name).parts[1:]
        if not parts:
            continue
        member.name = str(PurePosixPath(*parts))
        yield member
