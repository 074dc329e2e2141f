"""Pre-flight check for content and parity files."""

from .ArrayLayout import ArrayLayout
from .ArtifactMissing import ArtifactMissing


def check_artifacts(layout: ArrayLayout) -> None:
    """Raise ArtifactMissing for the first absent content or parity file."""
    if layout.content_file is None or not layout.content_file.exists():
        raise ArtifactMissing("Content", layout.content_file)
    for parity in layout.parity_files:
        if not parity.exists():
            raise ArtifactMissing("Parity", parity)
