"""Singly-linked list of integers with head and tail insert/delete."""

import logging
from collections.abc import Iterable, Iterator

from singlylist.errors import NodeAllocationError
from singlylist.types import NodeValue, Traversal

logger = logging.getLogger(__name__)


class Node:
    """A node in the singly-linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: NodeValue, next: "Node | None" = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def iter_chain(head: Node | None) -> Traversal:
    """Yield (index, value) pairs for every node reachable from head."""
    current = head
    index = 0
    while current is not None:
        yield index, current.value
        index += 1
        current = current.next


class SinglyLinkedList:
    """
    Singly-linked list owning a chain of integer nodes.

    Head operations are O(1). Tail operations walk the whole chain and are O(n),
    since nodes only link forward and no tail reference is kept.
    """

    def __init__(
        self,
        values: Iterable[NodeValue] | None = None,
        *,
        max_length: int | None = None,
    ) -> None:
        """
        Initialize the list.

        Args:
            values: Optional values to tail-insert in order.
            max_length: Maximum number of nodes the list may hold. Inserting
                beyond it raises NodeAllocationError. None means unbounded.
        """
        self._head: Node | None = None
        self._size = 0
        if max_length is not None and max_length < 0:
            raise ValueError(f"max_length must be non-negative, got {max_length}")
        self._max_length = max_length
        if values is not None:
            for value in values:
                self.insert_at_tail(value)

    @property
    def head(self) -> Node | None:
        """The first node, or None when the list is empty."""
        return self._head

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def _new_node(self, value: NodeValue) -> Node:
        """Create a detached node, failing instead of handing back a bad reference."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Node value must be int, got {type(value).__name__}")
        if self._max_length is not None and self._size >= self._max_length:
            logger.warning("Refusing to allocate node: list is at max_length=%d", self._max_length)
            raise NodeAllocationError(f"List is full (max_length={self._max_length})")
        try:
            return Node(value)
        except MemoryError as exc:
            logger.warning("Out of memory while allocating node for value %d", value)
            raise NodeAllocationError(f"Could not allocate node for value {value}") from exc

    def insert_at_head(self, value: NodeValue) -> None:
        """Insert value as the new head. O(1)."""
        node = self._new_node(value)
        node.next = self._head
        self._head = node
        self._size += 1

    def insert_at_tail(self, value: NodeValue) -> None:
        """Append value after the terminal node. O(n)."""
        node = self._new_node(value)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._size += 1

    def delete_at_head(self) -> NodeValue | None:
        """Remove the head node and return its value, or None if empty. O(1)."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        self._size -= 1
        return node.value

    def delete_at_tail(self) -> NodeValue | None:
        """Remove the terminal node and return its value, or None if empty. O(n)."""
        if self._head is None:
            return None
        if self._head.next is None:
            node = self._head
            self._head = None
            self._size -= 1
            return node.value

        prev = self._head
        current = self._head.next
        while current.next is not None:
            prev = current
            current = current.next
        prev.next = None
        self._size -= 1
        return current.value

    def traverse(self) -> Traversal:
        """Lazily yield (index, value) pairs from the current head. Never mutates."""
        return iter_chain(self._head)

    def clear(self) -> None:
        """Release every node, one at a time."""
        current = self._head
        self._head = None
        while current is not None:
            following = current.next
            # Released nodes must not keep the rest of the chain alive
            current.next = None
            current = following
        self._size = 0

    def __iter__(self) -> Iterator[NodeValue]:
        for _, value in self.traverse():
            yield value

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._head is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SinglyLinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"
