from __future__ import annotations
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    """A single link in the chain. Holds the only reference to its successor."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional["_Node[T]"] = None) -> None:
        self.value = value
        self.next = next


class LinkedList(Generic[T]):
    """Singly-linked list where every node owns the rest of the chain.

    The list holds the only reference to the first node and each node holds
    the only reference to the next one, so unlinking a node from the chain is
    what releases it. Left-side operations are O(1); right-side operations
    walk the chain and are O(n).
    """

    __slots__ = ("head",)

    def __init__(self) -> None:
        self.head: Optional[_Node[T]] = None

    def push_left(self, value: T) -> None:
        """Insert *value* as the new first element. O(1)."""
        self.head = _Node(value, self.head)

    def push_right(self, value: T) -> None:
        """Insert *value* as the new last element. O(n)."""
        node = _Node(value)
        if self.head is None:
            self.head = node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node

    def pop_left(self, default: Optional[T] = None) -> Optional[T]:
        """Remove and return the first element, or *default* if empty. O(1)."""
        first = self.head
        if first is None:
            return default
        # Promote the successor before cutting the detached node loose.
        self.head = first.next
        first.next = None
        return first.value

    def pop_right(self, default: Optional[T] = None) -> Optional[T]:
        """Remove and return the last element, or *default* if empty. O(n).

        Removing the only element leaves the list truly empty (``head is None``).
        """
        if self.head is None:
            return default
        if self.head.next is None:
            last = self.head
            self.head = None
            return last.value
        prev = self.head
        while prev.next.next is not None:  # type: ignore[union-attr]
            prev = prev.next  # type: ignore[assignment]
        last = prev.next
        prev.next = None
        return last.value  # type: ignore[union-attr]

    def collect(self) -> List[T]:
        """Return a new list of the elements, first to last, without mutating."""
        out: List[T] = []
        n = self.head
        while n is not None:
            out.append(n.value)
            n = n.next
        return out

    def clear(self) -> None:
        """Release every node.

        Links are cut one at a time so a long chain is torn down iteratively
        rather than through nested deallocation.
        """
        n = self.head
        self.head = None
        while n is not None:
            n.next, n = None, n.next

    def __len__(self) -> int:
        count = 0
        n = self.head
        while n is not None:
            count += 1
            n = n.next
        return count

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LinkedList({self.collect()!r})"
