"""Live, durable log of a run: console + output file + operator log."""

import sys
from pathlib import Path
from typing import TextIO

from ...utils.get_logger import get_logger
from ..array.TeeWriter import TeeWriter
from ..log.append_log import append_log

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class RunLog:
    """Markdown-flavoured run log.

    Everything written here reaches both the console and the run output
    file, which later becomes the report body. ``elog`` entries also go to
    the operator log and the package logger.
    """

    def __init__(self, output_file: Path, operator_log: Path, console: TextIO | None = None):
        self.output_file = output_file
        self.operator_log = operator_log
        output_file.parent.mkdir(parents=True, exist_ok=True)
        # truncated at the start of every run
        self._fh = output_file.open("w", encoding="utf-8")
        self.tee = TeeWriter(console if console is not None else sys.stderr, self._fh)
        self._log = get_logger("run")

    def line(self, text: str = "") -> None:
        self.tee.writeline(text)

    def elog(self, level: str, message: str) -> None:
        self.tee.writeline(message)
        append_log(self.operator_log, "run", level, message)
        self._log.log(_LEVELS.get(level, 20), message.replace("**", ""))

    def ruler(self) -> None:
        self.line("----")

    def codeblock(self) -> None:
        self.line("```")

    def h2(self, text: str) -> None:
        self.line(f"## {text}")

    def h3(self, text: str) -> None:
        self.line(f"### {text}")

    def read(self) -> str:
        self._fh.flush()
        return self.output_file.read_text(encoding="utf-8", errors="replace")

    def close(self) -> None:
        if not self._fh.closed:
            self._fh.close()
