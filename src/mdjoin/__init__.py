"""mdjoin: assemble Markdown documents from typed content nodes.

This package provides:
- Content nodes for text, headings, block-quotes, code blocks and links
- Builders for nested ordered/unordered lists and fixed-size tables
- A Document that renders nodes in order and flushes once to a sink
- Pydantic render configuration loadable from YAML
"""

from mdjoin.buffer import RenderBuffer
from mdjoin.config import RenderConfig, load_render_config
from mdjoin.document import Document, Node
from mdjoin.exceptions import (
    ConfigurationError,
    EmptyListError,
    ListCycleError,
    ListError,
    MdjoinError,
    SinkWriteError,
    TableCapacityError,
    TableError,
    TableIndexError,
)
from mdjoin.lists import List, ListItem, ListKind
from mdjoin.nodes import Block, Code, Heading, HeadingLevel, Link, Text
from mdjoin.protocols import Renderable, Sink
from mdjoin.sinks import FileSink, MemorySink
from mdjoin.table import Table

__version__ = "0.1.0"

__all__ = [
    # Document
    "Document",
    "Node",
    "RenderBuffer",
    # Nodes
    "Text",
    "Heading",
    "HeadingLevel",
    "Block",
    "Code",
    "Link",
    "Table",
    "List",
    "ListItem",
    "ListKind",
    # Protocols
    "Renderable",
    "Sink",
    # Sinks
    "FileSink",
    "MemorySink",
    # Configuration
    "RenderConfig",
    "load_render_config",
    # Exceptions
    "MdjoinError",
    "ConfigurationError",
    "TableError",
    "TableCapacityError",
    "TableIndexError",
    "ListError",
    "EmptyListError",
    "ListCycleError",
    "SinkWriteError",
]
