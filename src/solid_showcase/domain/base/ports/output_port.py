"""Output port - the single external interface of every demo."""
from abc import ABC, abstractmethod


class OutputPort(ABC):
    """Port for writing demo output lines."""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write one line of output."""
