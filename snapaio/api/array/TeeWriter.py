"""Fan-out text writer."""

from typing import TextIO


class TeeWriter:
    """Write every chunk to each sink in order, flushing after each write.

    Used to show tool output live while keeping a durable copy of it.
    """

    def __init__(self, *sinks: TextIO):
        self.sinks = list(sinks)

    def write(self, text: str) -> int:
        for sink in self.sinks:
            sink.write(text)
            sink.flush()
        return len(text)

    def writeline(self, text: str = "") -> None:
        self.write(f"{text}\n")

    def flush(self) -> None:
        for sink in self.sinks:
            sink.flush()
