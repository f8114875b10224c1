from typing import Protocol


class OutputPort(Protocol):
    def write_line(self, line: str) -> None:
        """Write one line of text; the newline is added by the adapter."""
        ...
