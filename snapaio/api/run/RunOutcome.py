"""What happened during one invocation."""

from dataclasses import dataclass, field
from typing import Any

from ..array.StepResult import StepResult


@dataclass
class RunOutcome:
    """Built up step by step by the coordinator, consumed by the report. Never persisted."""

    ran_diff: bool = False
    ran_sync: bool = False
    sync_succeeded: bool = False
    ran_scrub: bool = False
    scrub_succeeded: bool = False
    pre_sync_failed: bool = False
    jobs: list[str] = field(default_factory=list)
    steps: dict[str, StepResult] = field(default_factory=dict)

    @property
    def jobs_label(self) -> str:
        return " + ".join(self.jobs)

    def record(self, result: StepResult) -> None:
        self.steps[result.name] = result

    def to_dict(self) -> dict[str, Any]:
        return {
            "ran_diff": self.ran_diff,
            "ran_sync": self.ran_sync,
            "sync_succeeded": self.sync_succeeded,
            "ran_scrub": self.ran_scrub,
            "scrub_succeeded": self.scrub_succeeded,
            "pre_sync_failed": self.pre_sync_failed,
            "exit_status": {name: step.exit_status for name, step in self.steps.items()},
        }
