from __future__ import annotations

import logging

from pydantic import ValidationError

from ..errors import RegistryUnavailableError
from ..models.registry import RegistryEntry
from ._http import fetch_json_with_comments

logger = logging.getLogger(__name__)

PLUGIN_LIST_URL = "https://raw.githubusercontent.com/sidekickcode/analysers/master/analysers.json"


class HttpPluginRegistry:
    """The central list of known analysers, served as one JSON document."""

    def __init__(self, url: str = PLUGIN_LIST_URL) -> None:
        self.url = url

    def fetch_plugin_list(self) -> dict[str, RegistryEntry]:
        data = fetch_json_with_comments(self.url)
        if not isinstance(data, dict):
            raise RegistryUnavailableError(
                f"Expected an object of analysers at {self.url}, got {type(data).__name__}",
                url=self.url,
            )
        try:
            entries = {
                name: RegistryEntry.model_validate({**raw, "name": name})
                for name, raw in data.items()
            }
        except (TypeError, ValidationError) as e:
            raise RegistryUnavailableError(
                f"Invalid analyser list at {self.url}: {e}", url=self.url
            ) from e
        logger.info("Fetched %d analysers from %s", len(entries), self.url)
        return entries
