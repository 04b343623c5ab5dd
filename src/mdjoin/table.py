"""Fixed-size Markdown table builder."""

from __future__ import annotations

import logging

from mdjoin.buffer import RenderBuffer
from mdjoin.exceptions import TableCapacityError, TableIndexError
from mdjoin.nodes import Text

logger = logging.getLogger(__name__)


class Table:
    """Builder for fixed-size Markdown tables.

    Cells are filled row by row with add(); the first row is the header.
    Every column is padded to the length of the longest cell in the whole
    table.

    Strict entry points (add, update) raise on overflow or bad coordinates.
    Lenient ones (try_add, try_update) return None instead and leave the
    table untouched.

    Example:
        table = Table(2, 2).add("Speed").add("Ease").add("*").update(2, 2, "***")
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Table needs at least one row and one column, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells: list[Text | None] = [None] * (rows * cols)
        self.size = 0
        self.max_length = 0

    @property
    def capacity(self) -> int:
        return self.rows * self.cols

    @property
    def is_full(self) -> bool:
        return self.size >= self.capacity

    def add(self, data: str) -> Table:
        """Fill the next free cell."""
        if self.is_full:
            raise TableCapacityError(self.rows, self.cols)
        self._store(self.size, data)
        self.size += 1
        return self

    def try_add(self, data: str) -> Table | None:
        """Fill the next free cell, or return None when the table is full."""
        if self.is_full:
            logger.warning("Dropping cell %r: %dx%d table is full", data, self.rows, self.cols)
            return None
        return self.add(data)

    def update(self, row: int, col: int, data: str) -> Table:
        """Overwrite the cell at a 1-based (row, col)."""
        if not self._in_range(row, col):
            raise TableIndexError(row, col, self.rows, self.cols)
        self._store(self._index(row, col), data)
        return self

    def try_update(self, row: int, col: int, data: str) -> Table | None:
        """Overwrite a cell, or return None when (row, col) is out of range."""
        if not self._in_range(row, col):
            logger.warning("Ignoring update of cell (%d, %d) outside %dx%d table", row, col, self.rows, self.cols)
            return None
        return self.update(row, col, data)

    def cell(self, row: int, col: int) -> str:
        """Read the cell at a 1-based (row, col); unfilled cells are empty."""
        if not self._in_range(row, col):
            raise TableIndexError(row, col, self.rows, self.cols)
        text = self.cells[self._index(row, col)]
        return text.line if text is not None else ""

    def render(self, buffer: RenderBuffer) -> None:
        """Render header, separator and body rows."""
        width = self.max_length
        self._render_row(buffer, 1, width)
        buffer.write_line(f"| {'-' * width} " * self.cols + "|")
        for row in range(2, self.rows + 1):
            self._render_row(buffer, row, width)
        buffer.blank_line()

    def _render_row(self, buffer: RenderBuffer, row: int, width: int) -> None:
        for col in range(1, self.cols + 1):
            buffer.write(f"| {self.cell(row, col).ljust(width)} ")
        buffer.write_line("|")

    def _in_range(self, row: int, col: int) -> bool:
        return 1 <= row <= self.rows and 1 <= col <= self.cols

    def _index(self, row: int, col: int) -> int:
        # row-major: each row spans `cols` cells
        return (row - 1) * self.cols + (col - 1)

    def _store(self, index: int, data: str) -> None:
        self.max_length = max(self.max_length, len(data))
        self.cells[index] = Text(data)
