"""Pydantic models for the single-block content nodes.

Each node renders its content line(s) followed by exactly one blank line.
Nothing is escaped: Markdown special characters pass through verbatim.
"""

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, Field

from mdjoin.buffer import RenderBuffer


class HeadingLevel(IntEnum):
    """Heading depth, rendered as that many '#' characters."""

    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6


def _split_lines(code: str) -> list[str]:
    # only \n and \r\n end a line; other control characters stay in the text
    return code.replace("\r\n", "\n").split("\n")


class Text(BaseModel):
    """Plain paragraph text.

    The only node whose payload is meant to be changed in place.
    """

    line: str = ""

    def __init__(self, line: str = "", **data: Any) -> None:
        super().__init__(line=line, **data)

    def append(self, data: str) -> None:
        """Append data to the end of the current line."""
        self.line += data

    def render(self, buffer: RenderBuffer) -> None:
        buffer.write_line(self.line)
        buffer.blank_line()


class Heading(BaseModel):
    """Section heading.

    Example:
        title = Heading(HeadingLevel.H2, "Install")
        title.set_title("Installation")
    """

    level: HeadingLevel
    text: Text = Field(default_factory=Text)

    def __init__(self, level: int, title: str = "", **data: Any) -> None:
        data.setdefault("text", Text(title))
        super().__init__(level=level, **data)

    def set_title(self, data: str) -> None:
        """Replace the heading text."""
        self.text.line = data

    @property
    def marker(self) -> str:
        return "#" * int(self.level)

    def render(self, buffer: RenderBuffer) -> None:
        buffer.write_line(f"{self.marker} {self.text.line}")
        buffer.blank_line()


class Block(BaseModel):
    """Block-quote holding a single line of text."""

    text: Text = Field(default_factory=Text)

    def __init__(self, line: str = "", **data: Any) -> None:
        data.setdefault("text", Text(line))
        super().__init__(**data)

    def render(self, buffer: RenderBuffer) -> None:
        buffer.write_line(f"> {self.text.line}")
        buffer.blank_line()


class Code(BaseModel):
    """Fenced code block.

    Content is kept as a list of lines and joined with the document's
    line ending at render time, so every line of the output shares the
    same terminator.

    Example:
        code = Code("python")
        code.append_code("def hello():")
        code.append_code("    print('hi')")
    """

    language: str = ""
    lines: list[str] = Field(default_factory=list)

    def __init__(self, language: str = "", code: str | None = None, **data: Any) -> None:
        if code is not None:
            data.setdefault("lines", _split_lines(code))
        super().__init__(language=language, **data)

    def set_code(self, code: str) -> None:
        """Replace the whole code block content."""
        self.lines = _split_lines(code)

    def append_code(self, code: str) -> None:
        """Append code on a new line after the existing content."""
        self.lines.extend(_split_lines(code))

    def render(self, buffer: RenderBuffer) -> None:
        buffer.write_line(f"```{self.language}")
        buffer.write_line(buffer.config.line_ending.join(self.lines))
        buffer.write_line("```")
        buffer.blank_line()


class Link(BaseModel):
    """Hyperlink.

    str(link) gives the inline form, so links can be embedded in the text
    of other nodes.
    """

    description: str
    url: str

    def __init__(self, description: str, url: str, **data: Any) -> None:
        super().__init__(description=description, url=url, **data)

    @property
    def inline(self) -> str:
        return f"[{self.description}]({self.url})"

    def __str__(self) -> str:
        return self.inline

    def render(self, buffer: RenderBuffer) -> None:
        buffer.write_line(self.inline)
        buffer.blank_line()
