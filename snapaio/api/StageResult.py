"""Four-stage command result: announce, progress, result, output."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to its caller.

    The caller shows ``announce``, then iterates ``progress_callback(self)``;
    the callback does the work and fills in ``result``, ``output`` and
    ``success`` before it finishes.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def drain(self) -> "StageResult":
        """Run the progress callback to completion, discarding progress messages."""
        for _ in self.progress_callback(self):
            pass
        return self
