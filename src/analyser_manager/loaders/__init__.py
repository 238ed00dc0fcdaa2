from .config import (
    CONFIG_FILE,
    load_json_with_comments,
    load_plugin_config,
    parse_json_with_comments,
)
from .repo_config import DEFAULT_OPTIONS, get_all_analysers_for_config, load_repo_config

__all__ = [
    "CONFIG_FILE",
    "DEFAULT_OPTIONS",
    "get_all_analysers_for_config",
    "load_json_with_comments",
    "load_plugin_config",
    "load_repo_config",
    "parse_json_with_comments",
]
