"""Fixed demonstration scenarios for singlylist."""

import logging
from typing import TextIO

from singlylist.errors import NodeAllocationError
from singlylist.linkedlist import Node, SinglyLinkedList, iter_chain
from singlylist.printing import print_list, print_traversal

logger = logging.getLogger(__name__)


def creating_and_printing(file: TextIO | None = None) -> Node:
    """Wire three nodes by hand and print the chain."""
    c = Node(7)
    b = Node(6, c)
    a = Node(5, b)
    print_traversal(iter_chain(a), file=file)
    return a


def insert_at_list(file: TextIO | None = None) -> SinglyLinkedList:
    """Build [3, 5, 7] with head inserts, extend with tail inserts, and print."""
    lst = SinglyLinkedList()
    lst.insert_at_head(7)
    lst.insert_at_head(5)
    lst.insert_at_head(3)
    lst.insert_at_tail(10)
    lst.insert_at_tail(12)
    lst.insert_at_tail(14)
    print_list(lst, file=file)
    return lst


def delete_at_tail(file: TextIO | None = None) -> SinglyLinkedList:
    """Build [3, 5, 7], then delete the head and the tail, printing each stage."""
    lst = SinglyLinkedList()
    lst.insert_at_head(7)
    lst.insert_at_head(5)
    lst.insert_at_head(3)

    print("Before Delete:", file=file)
    print_list(lst, file=file)

    print("\nAfter Deleting head:", file=file)
    lst.delete_at_head()
    print_list(lst, file=file)

    print("\nAfter Deleting tail:", file=file)
    lst.delete_at_tail()
    print_list(lst, file=file)
    return lst


def main(file: TextIO | None = None) -> int:
    """Run every scenario in order. Returns the process exit status."""
    scenarios = (creating_and_printing, insert_at_list, delete_at_tail)
    try:
        for i, scenario in enumerate(scenarios):
            logger.debug("Running scenario %s", scenario.__name__)
            if i:
                print(file=file)
            scenario(file=file)
    except NodeAllocationError:
        logger.exception("Demonstration aborted")
        return 1
    return 0
