"""Document assembly: collect nodes, render them, flush once."""

from __future__ import annotations

import logging
from pathlib import Path

from mdjoin.buffer import RenderBuffer
from mdjoin.config import RenderConfig
from mdjoin.exceptions import SinkWriteError
from mdjoin.lists import List
from mdjoin.nodes import Block, Code, Heading, Link, Text
from mdjoin.protocols import Renderable, Sink
from mdjoin.sinks import FileSink
from mdjoin.table import Table

logger = logging.getLogger(__name__)

Node = Text | Heading | Block | Code | Link | Table | List


class Document:
    """A Markdown document bound to one output sink.

    Nodes are rendered in join order into a single buffer, which is
    written to the sink in one call by finalize().

    Example:
        doc = Document("README.md")
        doc.join(Heading(HeadingLevel.H1, "mdjoin"), Text("Hello")).finalize()
    """

    def __init__(self, target: str | Path | Sink, config: RenderConfig | None = None) -> None:
        self.sink: Sink = FileSink(target) if isinstance(target, (str, Path)) else target
        self.config = config or RenderConfig()
        self.nodes: list[Node] = []

    def join(self, *nodes: Node) -> Document:
        """Append nodes in order.

        Raises:
            TypeError: a node has no render(buffer) method
        """
        for node in nodes:
            if not isinstance(node, Renderable):
                raise TypeError(f"Cannot join {type(node).__name__}: it is not a renderable node")
        self.nodes.extend(nodes)
        logger.debug("Joined %d node(s), document now has %d", len(nodes), len(self.nodes))
        return self

    def render(self) -> str:
        """Render all nodes into a fresh buffer without touching the sink."""
        return self._render_buffer().getvalue()

    def finalize(self) -> None:
        """Render the document and write it to the sink.

        Raises:
            MdjoinError: a node failed to render; the sink is not called
            SinkWriteError: the sink could not be written
        """
        data = self._render_buffer().to_bytes()
        try:
            self.sink.write(data)
        except OSError as e:
            raise SinkWriteError(str(self.sink), str(e)) from e
        logger.debug("Flushed %d node(s), %d bytes to %s", len(self.nodes), len(data), self.sink)

    def store(self) -> None:
        """Alias of finalize()."""
        self.finalize()

    def _render_buffer(self) -> RenderBuffer:
        buffer = RenderBuffer(self.config)
        for node in self.nodes:
            node.render(buffer)
        return buffer
