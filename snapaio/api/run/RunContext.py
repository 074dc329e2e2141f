"""State threaded through one run."""

import time
from dataclasses import dataclass, field

from ..array.ArrayLayout import ArrayLayout
from ..array.ArrayTool import ArrayTool
from ..array.StepResult import StepResult
from ..config.SnapConfig import SnapConfig
from ..counter.CounterStore import CounterStore
from ..diff.ChangeSummary import ChangeSummary
from ..notify.Notifier import Notifier
from ..policy.ScrubVerdict import ScrubVerdict
from ..policy.SyncVerdict import SyncVerdict
from .RunLog import RunLog
from .RunOutcome import RunOutcome


@dataclass
class RunContext:
    """Everything one invocation knows. Passed explicitly, never global."""

    config: SnapConfig
    counters: CounterStore
    tool: ArrayTool
    log: RunLog
    notifier: Notifier
    layout: ArrayLayout | None = None
    summary: ChangeSummary | None = None
    sync_verdict: SyncVerdict | None = None
    sync_result: StepResult | None = None
    scrub_verdict: ScrubVerdict | None = None
    outcome: RunOutcome = field(default_factory=RunOutcome)
    subject: str = ""
    notified: bool = False
    warnings: list[str] = field(default_factory=list)
    started: float = field(default_factory=time.monotonic)

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started
