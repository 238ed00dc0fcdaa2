from ._http import download, fetch_json, fetch_json_with_comments
from ._npm import NPM_REGISTRY_URL, NpmRegistry
from ._registry import PLUGIN_LIST_URL, HttpPluginRegistry

__all__ = [
    "NPM_REGISTRY_URL",
    "PLUGIN_LIST_URL",
    "HttpPluginRegistry",
    "NpmRegistry",
    "download",
    "fetch_json",
    "fetch_json_with_comments",
]
