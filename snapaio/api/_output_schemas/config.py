"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""
    section: str = Field(..., description="Requested section, empty string when listing sections")
    content: dict[str, Any] = Field(..., description="Section content or list of sections")
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""
    version: str = Field(..., description="Installed snapaio version")
    tool_version: str = Field(..., description="Array tool version, empty string if unavailable")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
