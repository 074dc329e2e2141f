"""Sync safety thresholds."""

from pydantic import BaseModel, ConfigDict, Field


class ThresholdConfig(BaseModel):
    """Limits that stop a sync from running.

    ``sync_warn_threshold``: -1 never forces a sync after a breach, 0 always
    forces it, N > 0 forces it after N consecutive warned runs.
    """

    model_config = ConfigDict(extra="forbid")

    delete_threshold: int = Field(500, ge=0, description="Removed files at/above which sync is held back")
    update_threshold: int = Field(500, ge=0, description="Updated files at/above which sync is held back")
    sync_warn_threshold: int = Field(-1, ge=-1, description="Warnings before a forced sync (-1 never, 0 always)")
