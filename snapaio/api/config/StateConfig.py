"""Locations of the counters that persist between runs."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.get_home_dir import get_home_dir


class StateConfig(BaseModel):
    """Counter file locations."""

    model_config = ConfigDict(extra="forbid")

    sync_warn_file: str = Field(default_factory=lambda: str(get_home_dir("snapRAID.warnCount")))
    scrub_count_file: str = Field(default_factory=lambda: str(get_home_dir("snapRAID.scrubCount")))

    @field_validator("sync_warn_file", "scrub_count_file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return str(Path(v).expanduser())
