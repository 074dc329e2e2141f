"""Run an external command, streaming its combined output."""

import subprocess
from collections.abc import Sequence

from .TeeWriter import TeeWriter

# Exit status reported when the command could not be started at all
NOT_STARTED = 127


def run_streaming(command: Sequence[str] | str, sink: TeeWriter | None, shell: bool = False) -> tuple[int, str]:
    """Run ``command`` to completion, copying stdout+stderr into ``sink`` line by line.

    The call returns only after the process has exited and all of its output
    has been drained and written.

    Returns:
        (exit status, captured output)
    """
    lines: list[str] = []
    try:
        proc = subprocess.Popen(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            shell=shell,
        )
    except OSError as e:
        message = f"Cannot execute {command!r}: {e}\n"
        if sink is not None:
            sink.write(message)
        return NOT_STARTED, message

    assert proc.stdout is not None
    with proc.stdout:
        for line in proc.stdout:
            lines.append(line)
            if sink is not None:
                sink.write(line)
    return proc.wait(), "".join(lines)
