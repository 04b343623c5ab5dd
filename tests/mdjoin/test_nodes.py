"""Tests for single-block content nodes."""

import pytest
from pydantic import ValidationError

from mdjoin import (
    Block,
    Code,
    Heading,
    HeadingLevel,
    Link,
    List,
    MdjoinError,
    RenderBuffer,
    RenderConfig,
    Renderable,
    Table,
    Text,
)


def render(node: Renderable, config: RenderConfig | None = None) -> str:
    buf = RenderBuffer(config)
    node.render(buf)
    return buf.getvalue()


class TestText:
    """Tests for plain text."""

    def test_render(self) -> None:
        assert render(Text("hello")) == "hello\r\n\r\n"

    def test_append_in_place(self) -> None:
        text = Text("hello")
        text.append(", world")

        assert text.line == "hello, world"
        assert render(text) == "hello, world\r\n\r\n"


class TestHeading:
    """Tests for headings."""

    def test_level_three(self) -> None:
        assert render(Heading(HeadingLevel.H3, "Usage")) == "### Usage\r\n\r\n"

    def test_embedded_hashes_pass_through(self) -> None:
        result = render(Heading(3, "C# #tips"))

        assert result.startswith("### ")
        assert not result.startswith("####")
        assert result == "### C# #tips\r\n\r\n"

    def test_render_does_not_mutate(self) -> None:
        heading = Heading(HeadingLevel.H2, "Title")

        assert render(heading) == render(heading)
        assert heading.text.line == "Title"

    def test_set_title(self) -> None:
        heading = Heading(HeadingLevel.H1)
        heading.set_title("mdjoin")

        assert render(heading) == "# mdjoin\r\n\r\n"

    def test_all_levels(self) -> None:
        for level in HeadingLevel:
            assert render(Heading(level, "x")) == "#" * level + " x\r\n\r\n"

    @pytest.mark.parametrize("level", [0, 7])
    def test_invalid_level(self, level: int) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Heading(level, "x")

        assert not isinstance(exc_info.value, MdjoinError)


class TestBlock:
    """Tests for block-quotes."""

    def test_render(self) -> None:
        assert render(Block("quoted")) == "> quoted\r\n\r\n"

    def test_embeds_link(self) -> None:
        block = Block("author: " + str(Link("someone", "https://example.com")))
        assert render(block) == "> author: [someone](https://example.com)\r\n\r\n"


class TestCode:
    """Tests for fenced code blocks."""

    def test_render_with_code(self) -> None:
        code = Code("go", "go get example.com/pkg")
        assert render(code) == "```go\r\ngo get example.com/pkg\r\n```\r\n\r\n"

    def test_empty_code_block(self) -> None:
        assert render(Code()) == "```\r\n\r\n```\r\n\r\n"

    def test_append_code_adds_lines(self) -> None:
        code = Code("python")
        code.append_code("def hello():")
        code.append_code("    print('hi')")

        assert code.lines == ["def hello():", "    print('hi')"]
        assert render(code) == "```python\r\ndef hello():\r\n    print('hi')\r\n```\r\n\r\n"

    def test_set_code_normalizes_line_endings(self) -> None:
        code = Code("bash")
        code.append_code("old")
        code.set_code("a\nb\r\nc")

        assert render(code) == "```bash\r\na\r\nb\r\nc\r\n```\r\n\r\n"

    def test_control_characters_stay_in_line(self) -> None:
        code = Code("c", "a\x0cb\x0bc\u2028d")

        assert code.lines == ["a\x0cb\x0bc\u2028d"]
        assert render(code) == "```c\r\na\x0cb\x0bc\u2028d\r\n```\r\n\r\n"

    def test_trailing_newline_is_kept(self) -> None:
        assert render(Code("py", "x\n")) == "```py\r\nx\r\n\r\n```\r\n\r\n"
        assert render(Code("py", "x\n")) != render(Code("py", "x"))

    def test_append_code_with_trailing_newline(self) -> None:
        code = Code("py", "a")
        code.append_code("b\r\n")

        assert code.lines == ["a", "b", ""]

    def test_lf_config(self) -> None:
        code = Code("sh", "echo 1\necho 2")
        config = RenderConfig(line_ending="\n")

        assert render(code, config) == "```sh\necho 1\necho 2\n```\n\n"


class TestLink:
    """Tests for hyperlinks."""

    def test_inline_form(self) -> None:
        link = Link("docs", "https://example.com/docs")

        assert str(link) == "[docs](https://example.com/docs)"
        assert link.inline == str(link)

    def test_render(self) -> None:
        assert render(Link("a", "b")) == "[a](b)\r\n\r\n"


class TestRenderableProtocol:
    """Every node kind satisfies the Renderable protocol."""

    def test_nodes_are_renderable(self) -> None:
        nodes = [
            Text("t"),
            Heading(HeadingLevel.H1, "h"),
            Block("b"),
            Code("c"),
            Link("l", "u"),
            Table(1, 1),
            List(),
        ]
        for node in nodes:
            assert isinstance(node, Renderable)
