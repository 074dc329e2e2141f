"""Scrub configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ScrubConfig(BaseModel):
    """Scrub configuration. A percent of 0 disables scrubbing."""

    model_config = ConfigDict(extra="forbid")

    percent: int = Field(5, ge=0, le=100, description="Percentage of the array to scrub")
    age_days: int = Field(10, ge=0, description="Only scrub blocks older than this many days")
    delayed_runs: int = Field(0, ge=0, description="Eligible runs to wait between scrubs (0 scrubs every run)")
