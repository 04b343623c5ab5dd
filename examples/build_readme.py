"""Build a small README with a nested table of contents.

Usage:
    python examples/build_readme.py [output.md]
"""

import logging
import sys

from mdjoin import Block, Code, Document, Heading, HeadingLevel, Link, List, Table, Text

BASE_URL = "https://example.com/mdjoin#"


def build(target: str) -> None:
    toc = List.ordered()
    toc.append(str(Link("Introduction", BASE_URL + "introduction")))
    usage = toc.append(str(Link("Usage", BASE_URL + "usage")))
    steps = List.unordered()
    steps.append(str(Link("Install", BASE_URL + "install")))
    steps.append(str(Link("Build a document", BASE_URL + "build-a-document")))
    usage.attach_child(steps)

    table = Table(2, 2).add("Speed").add("Simplicity").add("*").update(2, 2, "***")

    example = Code("python")
    example.append_code('doc = Document("README.md")')
    example.append_code('doc.join(Heading(HeadingLevel.H1, "Hello")).finalize()')

    Document(target).join(
        Heading(HeadingLevel.H1, "mdjoin"),
        Block("author: " + str(Link("mdjoin developers", "https://example.com"))),
        Heading(HeadingLevel.H2, "Contents"),
        toc,
        Heading(HeadingLevel.H2, "Introduction"),
        Text("mdjoin assembles Markdown documents from typed content nodes."),
        table,
        Heading(HeadingLevel.H2, "Usage"),
        Heading(HeadingLevel.H3, "Install"),
        Code("bash", "pip install mdjoin"),
        Heading(HeadingLevel.H3, "Build a document"),
        example,
    ).finalize()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    build(sys.argv[1] if len(sys.argv) > 1 else "README.out.md")
