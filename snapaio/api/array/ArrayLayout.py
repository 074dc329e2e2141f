"""Storage artifacts enumerated by the array configuration."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ArrayLayout:
    content_file: Path | None
    parity_files: list[Path] = field(default_factory=list)
