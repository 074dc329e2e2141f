"""File-backed counters."""

import os
import re
from contextlib import suppress
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.StateConfig import StateConfig
from .CounterKind import CounterKind

_NUMBER = re.compile(r"^\d+$")


class CounterStore:
    """Reads and writes one non-negative integer per counter kind.

    A missing file or content that is not a number reads as 0. Clearing an
    absent counter is not an error. Writes go to a sibling temp file that is
    renamed over the target, so a reader never sees a torn value.
    """

    def __init__(self, paths: dict[CounterKind, Path]):
        missing = [kind.value for kind in CounterKind if kind not in paths]
        if missing:
            raise ValueError(f"No path configured for counter(s): {', '.join(missing)}")
        self.paths = {kind: Path(path) for kind, path in paths.items()}
        self._log = get_logger("counter")

    @classmethod
    def from_config(cls, state: StateConfig) -> "CounterStore":
        return cls(
            {
                CounterKind.SYNC_WARN: Path(state.sync_warn_file),
                CounterKind.SCRUB_DELAY: Path(state.scrub_count_file),
            }
        )

    def read(self, kind: CounterKind) -> int:
        path = self.paths[kind]
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return 0
        except OSError as e:
            self._log.warning("Cannot read counter %s at %s: %s", kind.value, path, e)
            return 0

        for line in content.splitlines():
            stripped = line.strip()
            if _NUMBER.match(stripped):
                return int(stripped)
        return 0

    def write(self, kind: CounterKind, value: int) -> None:
        if value < 0:
            raise ValueError(f"Counter {kind.value} cannot be negative: {value}")
        path = self.paths[kind]
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_name(f".{path.name}.{os.getpid()}.tmp")
        try:
            temp_path.write_text(f"{value}\n", encoding="utf-8")
            temp_path.replace(path)
        except OSError:
            with suppress(OSError):
                temp_path.unlink()
            raise
        self._log.debug("Counter %s = %d", kind.value, value)

    def clear(self, kind: CounterKind) -> bool:
        """Delete the counter file. Returns True if a file was removed."""
        path = self.paths[kind]
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        self._log.debug("Counter %s cleared", kind.value)
        return True

    def increment(self, kind: CounterKind) -> int:
        value = self.read(kind) + 1
        self.write(kind, value)
        return value
