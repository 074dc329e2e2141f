"""Read content and parity file locations from the array configuration."""

import re
from pathlib import Path

from ..config.ConfigMissing import ConfigMissing
from .ArrayLayout import ArrayLayout

# parity, 2-parity ... 6-parity, z-parity
_PARITY = re.compile(r"^([2-6z]-)*parity\b")


def read_array_layout(config_file: Path) -> ArrayLayout:
    """Parse the array configuration once.

    Comment lines (``#`` or ``;``) are ignored. The first ``content`` entry
    naming a ``snapraid.content`` file is the content file; every parity line
    contributes its comma-separated paths.

    Raises:
        ConfigMissing: If the configuration file cannot be read
    """
    try:
        text = config_file.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ConfigMissing(f"Array configuration not readable at {config_file}: {e}") from e

    content_file: Path | None = None
    parity_files: list[Path] = []
    for line in text.splitlines():
        if not line.strip() or line[0] in "#;":
            continue
        parts = line.split(None, 1)
        if len(parts) < 2:
            continue
        value = parts[1].strip()
        if content_file is None and "snapraid.content" in line:
            content_file = Path(value.split()[0])
        elif _PARITY.match(line):
            parity_files.extend(Path(p.strip()) for p in value.split(",") if p.strip())

    return ArrayLayout(content_file=content_file, parity_files=parity_files)
