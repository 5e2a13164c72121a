"""Infrastructure adapters implementing domain ports."""

from .output_adapters import ConsoleOutputAdapter, RecordingOutputAdapter

__all__ = ["ConsoleOutputAdapter", "RecordingOutputAdapter"]
