from __future__ import annotations
from typing import Any, Callable, Generic, NamedTuple, Optional, TypeVar

from .linked_list import LinkedList

T = TypeVar("T")


class StackPopResult(NamedTuple):
    """Outcome of :meth:`Stack.pop`; unpacks as ``(stack, value)``."""

    stack: "Stack[Any]"
    value: Optional[Any]


class Stack(Generic[T]):
    """LIFO stack delegating to the left end of a singly-linked list.

    ``length`` is tracked alongside the list and always equals the number of
    elements reachable in it.
    """

    __slots__ = ("length", "_items")

    def __init__(self, factory: Callable[[], Any] = LinkedList) -> None:
        self._items = factory()
        self.length: int = 0

    def push(self, value: T) -> "Stack[T]":
        """Push `value` on top (O(1)) and return the stack for chaining."""
        self._items.push_left(value)
        self.length += 1
        return self

    def pop(self) -> StackPopResult:
        """Pop the top value (O(1)).

        ``value`` is None when the stack was already empty; ``length`` then
        stays at 0.
        """
        if not self._items:
            return StackPopResult(self, None)
        value = self._items.pop_left()
        self.length -= 1
        return StackPopResult(self, value)

    @property
    def items(self) -> Any:
        """The backing list."""
        return self._items

    def __len__(self) -> int:
        return self.length

    def __bool__(self) -> bool:
        return self.length != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Stack({self._items.collect()!r})"
