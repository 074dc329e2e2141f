"""Array tool configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ArrayConfig(BaseModel):
    """Where the array tool lives and how it is invoked."""

    model_config = ConfigDict(extra="forbid")

    binary: str = Field("/usr/bin/snapraid", description="Path to the array tool binary")
    config_file: str = Field("/etc/snapraid.conf", description="Array configuration listing content and parity files")
    prehash: bool = Field(True, description="Read data twice during sync (sync -h)")
    quiet: bool = Field(True, description="Pass -q to sync and scrub")
