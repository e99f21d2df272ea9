from __future__ import annotations
import ctypes
import logging
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Handle value meaning "no node".
NIL = -1

# Marker held by free slots. ctypes keeps no reference for None, so storing
# None would leave the previous element alive in the array.
_EMPTY = object()


class ArenaLinkedList(Generic[T]):
    """A singly-linked list whose nodes live in a slot arena.

    Implementation notes
    --------------------
    • Nodes are addressed by integer handle into three parallel ctypes
      buffers: ``_values`` (py_object), ``_next`` (c_ssize_t) and
      ``_used`` (c_bool).
    • The list keeps the handle of the first node; each slot keeps the
      handle of the next one. Slots do not own each other: the list alone
      allocates and frees them, each exactly once.
    • Freed slots are threaded onto a free list through ``_next`` and
      reused before the arena grows.
    • Capacity grows geometrically (x2) when no free slot is left.
    """

    __slots__ = ("_values", "_next", "_used", "_capacity", "_head", "_free", "_allocated")

    # Initial number of slots in the arena.
    _INITIAL_CAPACITY = 4

    def __init__(self) -> None:
        self._capacity = self._INITIAL_CAPACITY
        self._values = self._make_values(self._capacity)
        self._next = (self._capacity * ctypes.c_ssize_t)()
        self._used = (self._capacity * ctypes.c_bool)()
        self._head = NIL
        self._free = NIL
        self._allocated = 0
        self._thread_free(0, self._capacity)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_values(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        buf = (capacity * ctypes.py_object)()
        # Unset py_object slots raise ValueError on read; start them empty.
        for i in range(capacity):
            buf[i] = _EMPTY
        return buf

    def _thread_free(self, start: int, stop: int) -> None:
        """Push slots ``start..stop-1`` onto the free list, lowest handle first out."""
        for i in reversed(range(start, stop)):
            self._next[i] = self._free
            self._free = i

    def _grow(self) -> None:
        """Double the arena, copying live slots and freeing the new ones."""
        old_cap = self._capacity
        new_cap = old_cap * 2
        values = self._make_values(new_cap)
        nxt = (new_cap * ctypes.c_ssize_t)()
        used = (new_cap * ctypes.c_bool)()
        for i in range(old_cap):
            values[i] = self._values[i]
            nxt[i] = self._next[i]
            used[i] = self._used[i]
        self._values, self._next, self._used = values, nxt, used
        self._capacity = new_cap
        self._thread_free(old_cap, new_cap)
        logger.debug("arena grown from %d to %d slots", old_cap, new_cap)

    def _alloc_slot(self, value: T, next_handle: int) -> int:
        """Take a slot off the free list and fill it. Returns its handle."""
        if self._free == NIL:
            self._grow()
        h = self._free
        self._free = self._next[h]
        self._values[h] = value
        self._next[h] = next_handle
        self._used[h] = True
        self._allocated += 1
        return h

    def _free_slot(self, handle: int) -> T:
        """Release a slot that is no longer reachable and return its value.

        Raises:
            RuntimeError: if the slot is not currently allocated.
        """
        if not self._used[handle]:
            raise RuntimeError(f"slot {handle} released twice")
        value = self._values[handle]
        self._values[handle] = _EMPTY
        self._used[handle] = False
        self._next[handle] = self._free
        self._free = handle
        self._allocated -= 1
        return value

    # --------------------------------- API -----------------------------------

    def push_left(self, value: T) -> None:
        """Insert `value` as the new first element. O(1)."""
        self._head = self._alloc_slot(value, self._head)

    def push_right(self, value: T) -> None:
        """Insert `value` as the new last element. O(n)."""
        if self._head == NIL:
            self._head = self._alloc_slot(value, NIL)
            return
        last = self._head
        while self._next[last] != NIL:
            last = self._next[last]
        # Allocation may grow the arena, so link only once the slot exists.
        h = self._alloc_slot(value, NIL)
        self._next[last] = h

    def pop_left(self, default: Optional[T] = None) -> Optional[T]:
        """Remove and return the first element, or `default` if empty. O(1)."""
        first = self._head
        if first == NIL:
            return default
        self._head = self._next[first]
        return self._free_slot(first)

    def pop_right(self, default: Optional[T] = None) -> Optional[T]:
        """Remove and return the last element, or `default` if empty. O(n).

        Removing the only element leaves the list with no head at all.
        """
        if self._head == NIL:
            return default
        nxt = self._next
        if nxt[self._head] == NIL:
            last = self._head
            self._head = NIL
            return self._free_slot(last)
        prev = self._head
        while nxt[nxt[prev]] != NIL:
            prev = nxt[prev]
        last = nxt[prev]
        nxt[prev] = NIL
        return self._free_slot(last)

    def collect(self) -> List[T]:
        """Return a new list of the elements, first to last, without mutating."""
        out: List[T] = []
        h = self._head
        while h != NIL:
            out.append(self._values[h])
            h = self._next[h]
        return out

    def clear(self) -> None:
        """Free every slot, first to last. Keeps capacity for re-use."""
        h = self._head
        self._head = NIL
        released = 0
        while h != NIL:
            following = self._next[h]
            self._free_slot(h)
            released += 1
            h = following
        if released:
            logger.debug("cleared %d slots", released)

    @property
    def allocated(self) -> int:
        """Number of slots currently holding an element."""
        return self._allocated

    @property
    def capacity(self) -> int:
        """Total number of slots in the arena, free or not."""
        return self._capacity

    def __len__(self) -> int:
        """Number of stored elements. O(1)."""
        return self._allocated

    def __bool__(self) -> bool:
        return self._head != NIL

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ArenaLinkedList({self.collect()!r})"
