"""Text rendering of list traversals."""

from collections.abc import Iterable
from typing import TextIO

from singlylist.linkedlist import SinglyLinkedList
from singlylist.types import NodeValue


def format_node(index: int, value: NodeValue) -> str:
    return f"Node {index}: {value}"


def format_lines(pairs: Iterable[tuple[int, NodeValue]]) -> list[str]:
    """Format each (index, value) pair as one output line."""
    return [format_node(index, value) for index, value in pairs]


def print_traversal(pairs: Iterable[tuple[int, NodeValue]], file: TextIO | None = None) -> None:
    """Print one "Node <index>: <value>" line per pair."""
    for line in format_lines(pairs):
        print(line, file=file)


def print_list(lst: SinglyLinkedList, file: TextIO | None = None) -> None:
    print_traversal(lst.traverse(), file=file)
