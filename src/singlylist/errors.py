"""Exception classes for singlylist."""


class SinglyListError(Exception):
    """Base exception for all singlylist errors."""


class NodeAllocationError(SinglyListError):
    """Raised when a new node cannot be created (memory exhausted or max_length reached)."""
