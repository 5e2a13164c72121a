"""Output adapters implementing OutputPort."""
import sys
from typing import List, Optional, TextIO

from solid_showcase.domain.base.ports import OutputPort


class ConsoleOutputAdapter(OutputPort):
    """Writes lines straight to a text stream, stdout by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write_line(self, line: str) -> None:
        # sys.stdout is looked up per call, not at construction
        stream = self._stream or sys.stdout
        stream.write(f"{line}\n")


class RecordingOutputAdapter(OutputPort):
    """Keeps written lines in memory."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def write_line(self, line: str) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)
