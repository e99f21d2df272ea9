"""Singly-linked lists under two node-ownership disciplines, and a stack on top."""

from .datastructures import ArenaLinkedList, LinkedList, Stack, StackPopResult

__version__ = "0.1.0"

__all__ = [
    "LinkedList",
    "ArenaLinkedList",
    "Stack",
    "StackPopResult",
]
