"""Sink implementations.

Concrete implementations of the Sink protocol.
"""

import logging
from pathlib import Path

from mdjoin.protocols import Sink

logger = logging.getLogger(__name__)


class FileSink(Sink):
    """Write the document to a file, creating or truncating it."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write(self, data: bytes) -> None:
        with open(self.path, "wb") as f:
            f.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), self.path)

    def __str__(self) -> str:
        return str(self.path)


class MemorySink(Sink):
    """Keep written documents in memory.

    Records every write so callers can check how often the sink was used.
    """

    def __init__(self) -> None:
        self.writes: list[bytes] = []

    def write(self, data: bytes) -> None:
        self.writes.append(data)

    @property
    def data(self) -> bytes:
        """Bytes of the most recent write, or b"" if nothing was written."""
        return self.writes[-1] if self.writes else b""

    def text(self, encoding: str = "utf-8") -> str:
        return self.data.decode(encoding)

    def reset(self) -> None:
        """Clear all recorded writes."""
        self.writes.clear()

    def __str__(self) -> str:
        return "<memory>"
