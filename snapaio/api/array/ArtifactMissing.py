"""A storage artifact required by the array is absent."""

from pathlib import Path

from ..RunAbort import RunAbort


class ArtifactMissing(RunAbort):
    """Content or parity file not found; the disks need attention."""

    def __init__(self, kind: str, path: Path | None):
        shown = str(path) if path is not None else "not configured"
        super().__init__(
            f"{kind} file ({shown}) not found!",
            subject=f"[ERROR] {kind} file ({shown}) not found",
        )
        self.kind = kind
        self.path = path
