from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PluginConfig(BaseModel):
    """How to run an analyser. Stored verbatim as the installed analyser's config.json."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    # opaque: values are kept as written, whatever their JSON type
    short_name: Any = Field(None, alias="shortName")
    version: Any = None
    command: Any = None


class RegistryEntry(BaseModel):
    """One analyser as listed in the central plugin list."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str
    registry: str  # package registry backend, e.g. "npm"
    config: PluginConfig


class PackageDist(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    tarball: str


class PackageVersion(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    dist: PackageDist


class PackageInfo(BaseModel):
    """Package registry metadata (npm "packument") for one analyser."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str | None = None
    dist_tags: dict[str, str] = Field(default_factory=dict, alias="dist-tags")
    versions: dict[str, PackageVersion] = {}
