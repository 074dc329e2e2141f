"""Post-processing steps."""

from pydantic import BaseModel, ConfigDict, Field


class PostprocessConfig(BaseModel):
    """Steps run after sync/scrub regardless of their outcome."""

    model_config = ConfigDict(extra="forbid")

    touch: bool = Field(True, description="Repair zero sub-second timestamps")
    smart: bool = Field(True, description="Log SMART information")
    status: bool = Field(False, description="Log array status")
    spindown: bool = Field(False, description="Spin down the array disks")
