"""Structured outcome of one external step."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StepResult:
    """Result of a single blocking external call.

    ``saw_completion_marker`` is the affirmative success signal: the tool's
    exit status does not separate "nothing to do" from non-fatal trouble, so
    callers that need to know a step really finished check the marker.
    """

    name: str
    exit_status: int
    output: str = ""
    saw_completion_marker: bool = False
    elapsed_secs: float = 0.0

    @property
    def completed(self) -> bool:
        return self.exit_status == 0
