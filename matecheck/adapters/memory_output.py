"""
In-memory output adapter.

Collects written lines instead of printing them.
Used for testing and for rendering a transcript as a string.

Implements OutputPort protocol.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MemoryOutput:
    """Stores every written line for later assertions."""

    lines: list[str] = field(default_factory=list)

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def render(self) -> str:
        """Transcript exactly as the console would receive it."""
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()
