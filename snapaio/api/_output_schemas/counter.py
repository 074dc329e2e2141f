"""Output schemas for counter commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class CounterShowOutput(BaseOutputSchema):
    """Output schema for counter show command."""
    counters: dict[str, int] = Field(..., description="Current value per counter kind")
    paths: dict[str, str] = Field(..., description="Backing file per counter kind")


class CounterClearOutput(BaseOutputSchema):
    """Output schema for counter clear command."""
    cleared: list[str] = Field(..., description="Counter kinds that were cleared")


register_output_schema("counter", "show", CounterShowOutput)
register_output_schema("counter", "clear", CounterClearOutput)
