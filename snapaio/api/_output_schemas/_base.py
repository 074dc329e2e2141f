"""Base output schema shared by every command."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Every command output carries ``errors`` and ``warnings``.

    A run that aborts reports the abort reason in ``errors``; a report that
    could not be delivered shows up in ``warnings``.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Fatal problems, empty when the command succeeded")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal problems, e.g. an undelivered report")
