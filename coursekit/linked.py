"""Singly linked list with an empty head node, and a stack built the same way."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

_RULE = "=" * 39


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


@dataclass
class Node:
    """A list cell holding an id and a value."""

    id: int
    data: float = 0.0
    next: Optional["Node"] = field(default=None, repr=False, compare=False)


def _walk(head: Node) -> Iterator[Node]:
    current = head.next
    while current is not None:
        yield current
        current = current.next


def _format_nodes(nodes: Iterable[Node]) -> str:
    lines = [_RULE + "\n"]
    lines.extend(
        f"node{count}: id={node.id}, data={node.data:f}\n"
        for count, node in enumerate(nodes)
    )
    lines.append("\n\n")
    return "".join(lines)


class LinkedList:
    """Linked list whose first cell is an empty head that holds no value."""

    def __init__(self) -> None:
        self._head = Node(0)
        self._size = 0

    def append(self, id: int, data: float) -> None:
        """Add a node at the tail."""
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        tail.next = Node(id, data)
        self._size += 1

    def prepend(self, id: int, data: float) -> None:
        """Add a node right after the head."""
        self._head.next = Node(id, data, self._head.next)
        self._size += 1

    def _find_previous(self, id: int) -> Optional[Node]:
        previous = self._head
        for current in _walk(self._head):
            if current.id == id:
                return previous
            previous = current
        return None

    def search_id(self, id: int) -> Optional[Node]:
        """Return the first node with ``id``, or None."""
        previous = self._find_previous(id)
        return None if previous is None else previous.next

    def insert_before(self, target_id: int, new_id: int) -> None:
        """Insert a node with ``new_id`` in front of the node with ``target_id``.

        Raises KeyError when ``target_id`` is not in the list.
        """
        previous = self._find_previous(target_id)
        if previous is None:
            raise KeyError(f"ID {target_id} is not found in the list.")
        previous.next = Node(new_id, 0.0, previous.next)
        self._size += 1

    def remove(self, id: int) -> None:
        """Unlink the first node with ``id``; KeyError if there is none."""
        previous = self._find_previous(id)
        if previous is None or previous.next is None:
            raise KeyError(f"{id} is not found in the list.")
        previous.next = previous.next.next
        self._size -= 1

    def remove_all(self) -> list[int]:
        """Empty the list, returning the ids removed from front to back."""
        freed = [node.id for node in _walk(self._head)]
        self._head.next = None
        self._size = 0
        return freed

    def format(self) -> str:
        """Render the list one numbered node per line between a rule and blank lines."""
        return _format_nodes(self)

    def __iter__(self) -> Iterator[Node]:
        return _walk(self._head)

    def __len__(self) -> int:
        return self._size


class Stack:
    """Last-in first-out stack kept as a linked list behind an empty head."""

    def __init__(self) -> None:
        self._top = Node(0)
        self._size = 0

    def push(self, id: int, data: float) -> None:
        """Put a node on top."""
        self._top.next = Node(id, data, self._top.next)
        self._size += 1

    def pop(self) -> Node:
        """Remove and return the top node; StackUnderflowError when empty."""
        current = self._top.next
        if current is None:
            raise StackUnderflowError("Stack underflow.")
        self._top.next = current.next
        self._size -= 1
        return Node(current.id, current.data)

    def format(self) -> str:
        """Render the stack from top to bottom in the list layout."""
        return _format_nodes(_walk(self._top))

    def __len__(self) -> int:
        return self._size