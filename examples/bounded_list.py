"""Handling allocation failure with a bounded list."""

from singlylist import NodeAllocationError, SinglyLinkedList


def main() -> None:
    """Fill a list up to its max_length and recover from the failed insert."""
    lst = SinglyLinkedList(max_length=3)
    for value in range(5):
        try:
            lst.insert_at_tail(value)
        except NodeAllocationError as exc:
            print(f"  Insert of {value} failed: {exc}")
            break
        print(f"  Inserted {value}")

    print(f"\nFinal list: {list(lst)}")


if __name__ == "__main__":
    main()
