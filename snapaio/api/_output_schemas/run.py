"""Output schemas for run commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RunOutput(BaseOutputSchema):
    """Output schema for the maintenance run command.

    All fields must always be present for consistency.
    """
    subject: str = Field(..., description="Notification subject, empty string if the run aborted before classification")
    jobs: list[str] = Field(..., description="Jobs that executed, in order")
    counts: dict[str, int] = Field(..., description="Change counts from the DIFF step, empty if unavailable")
    sync_decision: str = Field(..., description="Sync decision, empty string if not reached")
    scrub_decision: str = Field(..., description="Scrub decision, empty string if not reached")
    outcome: dict[str, Any] = Field(..., description="Per-step execution flags")
    notified: bool = Field(..., description="Whether a notification was sent")


register_output_schema("run", "run", RunOutput)
