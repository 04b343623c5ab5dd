"""mdjoin exception hierarchy.

Errors raised while building, rendering or flushing a document derive from
MdjoinError, so callers can catch them with a single except clause. Invalid
constructor arguments are reported the usual Python way instead: pydantic
ValidationError for node fields (such as a heading level outside 1..6),
ValueError for a table without rows or columns, and TypeError for joining
something that cannot render.

Usage:
    from mdjoin.exceptions import TableCapacityError, MdjoinError

    try:
        table.add("overflow")
    except TableCapacityError as e:
        print(f"Table is full: {e.rows}x{e.cols}")
    except MdjoinError as e:
        print(f"mdjoin error: {e}")
"""


class MdjoinError(Exception):
    """Base exception for all mdjoin errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(MdjoinError):
    """Invalid render configuration.

    Raised when a config file is not valid YAML or contains values
    that fail validation.
    """

    pass


# Table Errors


class TableError(MdjoinError):
    """Base class for table-related errors."""

    pass


class TableCapacityError(TableError):
    """More cells were added than the table can hold."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(f"Table overflow: a {rows}x{cols} table holds at most {rows * cols} cells")


class TableIndexError(TableError):
    """A 1-based cell coordinate lies outside the table."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Cell ({row}, {col}) is outside the table; rows must be in 1..{rows} "
            f"and columns in 1..{cols}"
        )


# List Errors


class ListError(MdjoinError):
    """Base class for list-related errors."""

    pass


class EmptyListError(ListError):
    """Operation needs a tail item but the list has none."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: the list is empty")


class ListCycleError(ListError):
    """A list is nested inside itself.

    Raised at render time when a list is reached again while it is still
    being rendered.
    """

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(f"List nesting cycle detected at depth {depth}")


# Sink Errors


class SinkWriteError(MdjoinError):
    """The finished document could not be written to its sink."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Failed to write document to {target}: {reason}")
