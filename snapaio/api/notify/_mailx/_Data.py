"""mailx transport configuration data."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """Local mail program settings."""

    model_config = ConfigDict(extra="forbid")

    binary: str = Field("/usr/bin/mailx", description="Path to the mail program")
