"""Counts reported by the comparison step."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ChangeSummary:
    """File-level changes since the last sync. Immutable once parsed."""

    added: int
    removed: int
    updated: int
    moved: int
    copied: int

    @property
    def total(self) -> int:
        return self.added + self.removed + self.updated + self.moved + self.copied

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    def describe(self) -> str:
        return (
            f"Added [{self.added}] - Deleted [{self.removed}] - Moved [{self.moved}]"
            f" - Copied [{self.copied}] - Updated [{self.updated}]"
        )
