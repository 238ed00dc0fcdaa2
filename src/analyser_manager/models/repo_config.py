from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalyserSpec(BaseModel):
    """An analyser reference as declared by a repo, plus its run options."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str
    version: str | None = None
    fail_ci_on_error: bool = Field(False, alias="failCiOnError")
