"""Nested ordered and unordered lists.

A List owns a singly-linked chain of ListItems; each item may own one child
List, so nesting forms a tree. Rendering walks the tree depth-first: an
item's line, then its whole child list one level deeper, then the next
sibling.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from mdjoin.buffer import RenderBuffer
from mdjoin.exceptions import EmptyListError, ListCycleError
from mdjoin.nodes import Text


class ListKind(str, Enum):
    """Marker style of a list."""

    ORDERED = "ordered"
    UNORDERED = "unordered"


class ListItem:
    """One entry of a List, optionally owning a nested child list."""

    def __init__(self, text: str) -> None:
        self.text = Text(text)
        self.next: ListItem | None = None
        self.child: List | None = None

    def attach_child(self, child: List) -> None:
        """Nest child under this item, replacing any previous child."""
        self.child = child


class List:
    """Builder for (possibly nested) Markdown lists.

    Example:
        toc = List.ordered()
        toc.append("Introduction")
        usage = toc.append("Usage")
        steps = List.unordered()
        steps.append("Install")
        steps.append("Run")
        usage.attach_child(steps)
    """

    def __init__(self, kind: ListKind = ListKind.UNORDERED) -> None:
        self.kind = kind
        self.head: ListItem | None = None
        self.tail: ListItem | None = None

    @classmethod
    def ordered(cls) -> List:
        return cls(ListKind.ORDERED)

    @classmethod
    def unordered(cls) -> List:
        return cls(ListKind.UNORDERED)

    @property
    def is_empty(self) -> bool:
        return self.head is None

    def append(self, text: str) -> ListItem:
        """Add an item at the end and return it, so children can be attached."""
        item = ListItem(text)
        if self.tail is None:
            self.head = item
        else:
            self.tail.next = item
        self.tail = item
        return item

    def attach_child(self, item: ListItem, child: List) -> None:
        """Nest child under item, replacing any previous child."""
        item.attach_child(child)

    def append_child_list(self, child: List) -> None:
        """Nest child under the last item of this list."""
        if self.tail is None:
            raise EmptyListError("attach a child list")
        self.tail.attach_child(child)

    def items(self) -> Iterator[ListItem]:
        """Iterate items in append order."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[ListItem]:
        return self.items()

    def __len__(self) -> int:
        return sum(1 for _ in self.items())

    def render(self, buffer: RenderBuffer) -> None:
        """Render the list and all nested lists into the buffer.

        Walks the tree with an explicit stack, so nesting depth is not bounded
        by the interpreter's recursion limit.

        Raises:
            ListCycleError: a list is nested inside itself
        """
        # active holds the lists on the current path from the root
        active = {id(self)}
        stack: list[tuple[List, Iterator[tuple[int, ListItem]], int]] = [
            (self, enumerate(self.items(), start=1), 0)
        ]
        while stack:
            md_list, items, depth = stack[-1]
            entry = next(items, None)
            if entry is None:
                buffer.blank_line()
                stack.pop()
                active.discard(id(md_list))
                continue

            index, item = entry
            buffer.write_line(f"{buffer.indent(depth)}{md_list._marker(buffer, index)} {item.text.line}")
            child = item.child
            if child is not None:
                if id(child) in active:
                    raise ListCycleError(depth + 1)
                active.add(id(child))
                stack.append((child, enumerate(child.items(), start=1), depth + 1))

    def _marker(self, buffer: RenderBuffer, index: int) -> str:
        if self.kind is ListKind.ORDERED:
            return f"{index}."
        return buffer.config.bullet
