"""singlylist - Singly-linked list of integers with head/tail insert and delete."""

from singlylist.errors import NodeAllocationError, SinglyListError
from singlylist.linkedlist import Node, SinglyLinkedList, iter_chain
from singlylist.printing import format_lines, format_node, print_list, print_traversal
from singlylist.types import NodeValue, Traversal

__version__ = "0.0.1"

__all__ = [
    "SinglyLinkedList",
    "Node",
    "iter_chain",
    "SinglyListError",
    "NodeAllocationError",
    "format_node",
    "format_lines",
    "print_list",
    "print_traversal",
    "NodeValue",
    "Traversal",
]
