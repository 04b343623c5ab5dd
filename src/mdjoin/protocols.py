"""Protocols for document rendering.

Defines the contracts between the Document and the pieces it drives:
content nodes that render themselves, and sinks that receive the result.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mdjoin.buffer import RenderBuffer


@runtime_checkable
class Renderable(Protocol):
    """Protocol for content nodes.

    Implementations append their Markdown form to the buffer and must not
    mutate themselves while doing so.
    """

    def render(self, buffer: "RenderBuffer") -> None:
        """Write this node into the buffer."""
        ...


@runtime_checkable
class Sink(Protocol):
    """Protocol for document destinations.

    A sink receives the whole encoded document in one write call.
    Examples: FileSink, MemorySink
    """

    def write(self, data: bytes) -> None:
        """Persist the encoded document."""
        ...
