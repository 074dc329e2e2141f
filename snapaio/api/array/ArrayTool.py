"""Array tool invocation."""

import os
import re
import subprocess
import time
from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.ConfigMissing import ConfigMissing
from .run_streaming import run_streaming
from .StepResult import StepResult
from .TeeWriter import TeeWriter

# Lines the tool prints when a sync or scrub has finished its work
COMPLETION_MARKERS = ("Everything OK", "Nothing to do")

_VERSION = re.compile(r"v(\S+)\s+by")


def has_completion_marker(output: str) -> bool:
    return any(line.startswith(COMPLETION_MARKERS) for line in output.splitlines())


class ArrayTool:
    """Runs array-tool subcommands as single blocking calls.

    Output of teed steps is written to ``sink`` as it is produced.
    """

    def __init__(self, binary: Path | str, sink: TeeWriter | None = None):
        self.binary = Path(binary)
        self.sink = sink
        self._log = get_logger("array")

    def check(self) -> None:
        """Raise ConfigMissing if the binary is not an executable file."""
        if not self.binary.is_file():
            raise ConfigMissing(f"Array tool not found at {self.binary}")
        if not os.access(self.binary, os.X_OK):
            raise ConfigMissing(f"Array tool not executable at {self.binary}")

    def version(self) -> str:
        """Version reported by ``-V``, empty string if it cannot be determined."""
        try:
            proc = subprocess.run([str(self.binary), "-V"], capture_output=True, text=True, check=False)
        except OSError as e:
            self._log.warning("Cannot query array tool version: %s", e)
            return ""
        text = (proc.stdout or proc.stderr).strip()
        match = _VERSION.search(text)
        if match:
            return match.group(1)
        return text.splitlines()[0] if text else ""

    def run(self, name: str, *args: str, tee: bool = True) -> StepResult:
        command = [str(self.binary), name, *args]
        self._log.info("Running %s", " ".join(command))
        start = time.monotonic()
        status, output = run_streaming(command, self.sink if tee else None)
        elapsed = time.monotonic() - start
        self._log.info("%s exited with status %d after %.1fs", name, status, elapsed)
        return StepResult(
            name=name,
            exit_status=status,
            output=output,
            saw_completion_marker=has_completion_marker(output),
            elapsed_secs=elapsed,
        )

    def diff(self) -> StepResult:
        return self.run("diff")

    def sync(self, prehash: bool = False, quiet: bool = False) -> StepResult:
        args = []
        if prehash:
            args.append("-h")
        if quiet:
            args.append("-q")
        return self.run("sync", *args)

    def scrub(self, percent: int, age_days: int, quiet: bool = False) -> StepResult:
        args = ["-p", str(percent), "-o", str(age_days)]
        if quiet:
            args.append("-q")
        return self.run("scrub", *args)

    def status(self, tee: bool = True) -> StepResult:
        return self.run("status", tee=tee)

    def smart(self) -> StepResult:
        return self.run("smart")

    def touch(self) -> StepResult:
        return self.run("touch")

    def down(self) -> StepResult:
        return self.run("down")
