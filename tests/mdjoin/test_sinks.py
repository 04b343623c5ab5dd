"""Tests for sinks and the render buffer."""

from pathlib import Path

from mdjoin import FileSink, MemorySink, RenderBuffer, RenderConfig, Sink


class TestFileSink:
    """Tests for FileSink."""

    def test_writes_bytes(self, tmp_path: Path) -> None:
        sink = FileSink(tmp_path / "out.md")
        sink.write(b"# x\r\n")

        assert (tmp_path / "out.md").read_bytes() == b"# x\r\n"
        assert str(sink) == str(tmp_path / "out.md")

    def test_truncates_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.md"
        path.write_bytes(b"old content that is longer")

        FileSink(str(path)).write(b"new")

        assert path.read_bytes() == b"new"


class TestMemorySink:
    """Tests for MemorySink."""

    def test_records_writes(self) -> None:
        sink = MemorySink()
        assert sink.data == b""

        sink.write(b"one")
        sink.write(b"two")

        assert sink.writes == [b"one", b"two"]
        assert sink.text() == "two"

    def test_reset(self) -> None:
        sink = MemorySink()
        sink.write(b"x")
        sink.reset()
        assert sink.writes == []

    def test_sinks_satisfy_protocol(self, tmp_path: Path) -> None:
        assert isinstance(MemorySink(), Sink)
        assert isinstance(FileSink(tmp_path / "x"), Sink)


class TestRenderBuffer:
    """Tests for RenderBuffer."""

    def test_write_line_and_blank(self, buffer: RenderBuffer) -> None:
        buffer.write("a")
        buffer.write_line("b")
        buffer.blank_line()

        assert buffer.getvalue() == "ab\r\n\r\n"

    def test_indent(self) -> None:
        assert RenderBuffer().indent(2) == "      "
        assert RenderBuffer(RenderConfig(indent_width=0)).indent(5) == ""

    def test_to_bytes_uses_config_encoding(self) -> None:
        buf = RenderBuffer(RenderConfig(encoding="utf-16-le", line_ending="\n"))
        buf.write_line("é")

        assert buf.to_bytes() == "é\n".encode("utf-16-le")
