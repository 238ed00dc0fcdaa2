import io
import json
import tarfile

import pytest

CONFIG = {"shortName": "david-dm", "version": "1.0.5", "failureType": "warning"}

INSTALL_SCRIPT = "#!/bin/sh\necho installed > installed.txt\n"


def build_tarball(files: dict[str, str | bytes], top: str = "package") -> bytes:
    """Build an npm-style .tgz with every file under a top-level folder."""
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name, content in files.items():
            data = content.encode() if isinstance(content, str) else content
            info = tarfile.TarInfo(f"{top}/{name}")
            info.size = len(data)
            info.mode = 0o755 if name.startswith("bin/") else 0o644
            tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


def analyser_tarball(config: dict | None = None) -> bytes:
    return build_tarball(
        {
            "config.json": json.dumps(config if config is not None else CONFIG),
            "bin/install": INSTALL_SCRIPT,
            "index.js": "module.exports = {};\n",
        }
    )


class RecordingHookRunner:
    """Stands in for bin/install; records the directories it was run in."""

    def __init__(self, error: Exception | None = None):
        self.calls = []
        self.error = error

    def __call__(self, directory):
        self.calls.append(directory)
        if self.error is not None:
            raise self.error


@pytest.fixture
def hook_runner():
    return RecordingHookRunner()
