"""Flatten a repo's per-language analyser declarations into one list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..errors import ConfigParseError
from ..models.repo_config import AnalyserSpec
from .config import load_json_with_comments

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS: dict[str, Any] = {"failCiOnError": False}


def load_repo_config(path: Path) -> dict[str, Any]:
    """Read a .sidekickrc-style repo config file."""
    data = load_json_with_comments(path)
    if not isinstance(data, dict):
        raise ConfigParseError(f"Expected a JSON object in {path}", path=path)
    return data


def get_all_analysers_for_config(repo_config: dict[str, Any]) -> list[AnalyserSpec]:
    """Return every analyser declared under ``languages``, deduplicated by name.

    The expected shape is::

        {"languages": {"js": {"quality": ["sidekick-jshint",
                                          {"sidekick-eslint": {"failCiOnError": true}}]}}}

    An entry is either a bare analyser name or a single-key object mapping the
    name to its options. Options are merged over DEFAULT_OPTIONS. When a name
    is declared more than once, the first declaration wins. Malformed sections
    are skipped.
    """
    languages = repo_config.get("languages")
    if not isinstance(languages, dict):
        return []

    result: list[AnalyserSpec] = []
    seen: set[str] = set()
    for language, categories in languages.items():
        if not isinstance(categories, dict):
            continue
        for category, entries in categories.items():
            if not isinstance(entries, list):
                continue
            for entry in entries:
                parsed = _parse_entry(entry)
                if parsed is None:
                    logger.debug("Skipping malformed analyser entry in %s/%s", language, category)
                    continue
                name, options = parsed
                if name in seen:
                    continue
                seen.add(name)
                try:
                    result.append(
                        AnalyserSpec.model_validate({**DEFAULT_OPTIONS, **options, "name": name})
                    )
                except ValidationError:
                    seen.discard(name)
                    logger.debug("Skipping analyser %s with invalid options", name)
    return result


def _parse_entry(entry: object) -> tuple[str, dict[str, Any]] | None:
    if isinstance(entry, str):
        return entry, {}
    if isinstance(entry, dict) and len(entry) == 1:
        name, options = next(iter(entry.items()))
        if isinstance(name, str):
            return name, options if isinstance(options, dict) else {}
    return None
