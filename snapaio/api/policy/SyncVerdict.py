"""Result of the sync decision."""

from dataclasses import dataclass, field

from .SyncDecision import SyncDecision


@dataclass(frozen=True)
class SyncVerdict:
    """What the policy decided about sync, and why.

    ``notes`` are (level, message) pairs for the run log.
    """

    decision: SyncDecision
    delete_breach: bool = False
    update_breach: bool = False
    warn_count: int = 0
    last_warning: bool = False
    notes: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def breached(self) -> bool:
        return self.delete_breach or self.update_breach

    @property
    def runs(self) -> bool:
        return self.decision in (SyncDecision.RUN, SyncDecision.RUN_FORCED)
