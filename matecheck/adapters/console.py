import sys
from typing import TextIO


class ConsoleOutput:
    """Writes lines to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        # Resolve stdout per call so redirected streams are honoured
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{line}\n")
