"""Shared pytest fixtures for mdjoin tests."""

import pytest

from mdjoin import MemorySink, RenderBuffer, RenderConfig


@pytest.fixture
def memory_sink() -> MemorySink:
    """Fixture that provides an in-memory sink.

    Yields:
        MemorySink recording every write made to it
    """
    sink = MemorySink()
    yield sink
    sink.reset()


@pytest.fixture
def buffer() -> RenderBuffer:
    """Fixture that provides an empty buffer with default (CRLF) config."""
    return RenderBuffer(RenderConfig())


class FailingSink:
    """Sink whose every write fails like a full disk."""

    def write(self, data: bytes) -> None:
        raise OSError("No space left on device")

    def __str__(self) -> str:
        return "<failing>"


@pytest.fixture
def failing_sink() -> FailingSink:
    return FailingSink()
