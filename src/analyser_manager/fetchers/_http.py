from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from ..errors import DownloadError, RegistryUnavailableError
from ..loaders.config import parse_json_with_comments

logger = logging.getLogger(__name__)

TIMEOUT = 30


def _get(url: str) -> httpx.Response:
    logger.debug("Fetching %s", url)
    try:
        response = httpx.get(url, follow_redirects=True, timeout=TIMEOUT)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise RegistryUnavailableError(
            f"HTTP {e.response.status_code} fetching {url}", url=url
        ) from e
    except httpx.HTTPError as e:
        raise RegistryUnavailableError(f"Network error fetching {url}: {e}", url=url) from e
    return response


def fetch_json(url: str) -> Any:
    """GET ``url`` and parse the body as strict JSON."""
    response = _get(url)
    try:
        return response.json()
    except ValueError as e:
        raise RegistryUnavailableError(f"Invalid JSON at {url}: {e}", url=url) from e


def fetch_json_with_comments(url: str) -> Any:
    """GET ``url`` and parse the body as JSON that may contain comments."""
    response = _get(url)
    try:
        return parse_json_with_comments(response.text)
    except ValueError as e:
        raise RegistryUnavailableError(f"Invalid JSON at {url}: {e}", url=url) from e


def download(url: str, dest: Path) -> None:
    """Stream ``url`` to the file ``dest``."""
    logger.debug("Downloading %s to %s", url, dest)
    try:
        with httpx.stream("GET", url, follow_redirects=True, timeout=TIMEOUT) as response:
            response.raise_for_status()
            with dest.open("wb") as f:
                for chunk in response.iter_bytes():
                    f.write(chunk)
    except httpx.HTTPStatusError as e:
        raise DownloadError(
            f"HTTP {e.response.status_code} fetching tarball {url}", url=url
        ) from e
    except httpx.HTTPError as e:
        raise DownloadError(f"Unable to fetch tarball {url}: {e}", url=url) from e
    except OSError as e:
        raise DownloadError(f"Unable to write tarball {dest}: {e}", url=url) from e
