"""Result of the scrub decision."""

from dataclasses import dataclass, field

from .ScrubDecision import ScrubDecision


@dataclass(frozen=True)
class ScrubVerdict:
    decision: ScrubDecision
    delay_count: int = 0
    last_deferred: bool = False
    notes: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def runs(self) -> bool:
        return self.decision is ScrubDecision.RUN
