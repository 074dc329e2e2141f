"""External commands run around the sync job."""

from pydantic import BaseModel, ConfigDict, Field


class HooksConfig(BaseModel):
    """Commands run only when a sync is allowed; any failure cancels the sync."""

    model_config = ConfigDict(extra="forbid")

    pre_sync: list[str] = Field(default_factory=list, description="Shell commands run before sync")
