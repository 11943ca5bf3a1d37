"""Basic usage example for singlylist."""

from singlylist import SinglyLinkedList, print_list


def main() -> None:
    """Demonstrate head and tail operations."""
    lst = SinglyLinkedList()

    print("=== Head and Tail Inserts ===\n")
    for value in (7, 5, 3):
        lst.insert_at_head(value)
    for value in (10, 12, 14):
        lst.insert_at_tail(value)
    print_list(lst)
    print(f"Length: {len(lst)}\n")

    print("=== Head and Tail Deletes ===\n")
    print(f"Removed head: {lst.delete_at_head()}")
    print(f"Removed tail: {lst.delete_at_tail()}")
    print_list(lst)


if __name__ == "__main__":
    main()
