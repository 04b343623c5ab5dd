"""In-memory accumulator that nodes render into."""

import io

from mdjoin.config import RenderConfig


class RenderBuffer:
    """Text buffer bound to a RenderConfig.

    Example:
        buf = RenderBuffer()
        buf.write_line("# Title")
        buf.blank_line()
        assert buf.getvalue() == "# Title\\r\\n\\r\\n"
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        self._out = io.StringIO()

    def write(self, data: str) -> None:
        """Write data with no terminator."""
        self._out.write(data)

    def write_line(self, data: str = "") -> None:
        """Write data followed by the configured line ending."""
        self._out.write(data + self.config.line_ending)

    def blank_line(self) -> None:
        self._out.write(self.config.line_ending)

    def indent(self, depth: int) -> str:
        """Leading whitespace for a list line at the given nesting depth."""
        return " " * (depth * self.config.indent_width)

    def getvalue(self) -> str:
        return self._out.getvalue()

    def to_bytes(self) -> bytes:
        """Encode the accumulated text with the configured encoding."""
        return self.getvalue().encode(self.config.encoding)
