from .linked_list import LinkedList
from .arena_list import ArenaLinkedList
from .stack import Stack, StackPopResult

__all__ = [
    "LinkedList",
    "ArenaLinkedList",
    "Stack",
    "StackPopResult",
]
