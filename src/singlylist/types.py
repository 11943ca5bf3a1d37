"""Type definitions for singlylist."""

from collections.abc import Iterator
from typing import TypeAlias

# Payload held by every node
NodeValue: TypeAlias = int

# Lazy sequence of (zero-based index, value) pairs, head to tail
Traversal: TypeAlias = Iterator[tuple[int, NodeValue]]
