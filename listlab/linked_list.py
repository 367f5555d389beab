"""Singly-linked list of integers.

The list owns a strict chain of :class:`ListNode` objects starting at
``head``. Every node is referenced exactly once (by its predecessor or by the
list head) so the chain can never contain a cycle or an orphaned node. The
element count is cached on the list and kept in lock-step with every
mutation, which makes :meth:`LinkedList.len` ``O(1)``.

The APIs provide:

* ``insert_tail`` / ``insert_head`` – splice a new node at either end.
* ``remove`` – unlink the first node holding a value.
* ``list`` – materialise the values in head-to-tail order.
* ``find_mid`` – locate the midpoint with a fast/slow two-pointer walk.

All traversals are iterative so long chains never hit the recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

__all__ = [
    "EmptyListError",
    "LinkedList",
    "ListNode",
    "ValueNotFoundError",
]


class ValueNotFoundError(LookupError):
    """Raised when :meth:`LinkedList.remove` cannot find the target value."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Value {value} is not present in the list")
        self.value = value


class EmptyListError(LookupError):
    """Raised when a query needs at least one element."""


def _validate_value(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("List values must be integers")
    return value


@dataclass(slots=True)
class ListNode:
    """A single list element owning the remainder of the chain."""

    value: int
    next: Optional["ListNode"] = None

    def __post_init__(self) -> None:
        _validate_value(self.value)


class LinkedList:
    """Ordered chain of integer nodes with a cached element count."""

    __slots__ = ("head", "_size")

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self.head: Optional[ListNode] = None
        self._size = 0
        if values is not None:
            for value in list(values):
                self.insert_tail(value)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def insert_tail(self, value: int) -> None:
        """Append *value* after the current tail node."""

        node = ListNode(_validate_value(value))
        if self.head is None:
            self.head = node
        else:
            cursor = self.head
            while cursor.next is not None:
                cursor = cursor.next
            cursor.next = node
        self._size += 1

    def insert_head(self, value: int) -> None:
        """Make a node holding *value* the new head."""

        self.head = ListNode(_validate_value(value), next=self.head)
        self._size += 1

    def remove(self, value: int) -> int:
        """Unlink the first node equal to *value* and return its value.

        The list is left untouched and ``ValueNotFoundError`` is raised when no
        node matches. Later duplicates of *value* stay in place.
        """

        target = _validate_value(value)
        previous: Optional[ListNode] = None
        cursor = self.head
        while cursor is not None:
            if cursor.value == target:
                if previous is None:
                    self.head = cursor.next
                else:
                    previous.next = cursor.next
                cursor.next = None
                self._size -= 1
                return cursor.value
            previous = cursor
            cursor = cursor.next
        raise ValueNotFoundError(target)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list(self) -> List[int]:
        """Return the stored values in head-to-tail order."""

        return list(self)

    def find_mid(self) -> int:
        """Return the midpoint value found by a fast/slow pointer walk.

        For an odd length ``n`` this is the element at position ``ceil(n/2)``.
        For an even length the walk lands on position ``n/2 + 1``, the later of
        the two middle candidates.
        """

        if self.head is None:
            raise EmptyListError("Cannot find the midpoint of an empty list")
        slow = self.head
        fast: Optional[ListNode] = self.head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            # slow trails fast, so it always has a successor here
            assert slow.next is not None
            slow = slow.next
        return slow.value

    def len(self) -> int:
        """Return the cached element count."""

        return self._size

    def nodes(self) -> Iterator[ListNode]:
        """Yield every node from head to tail."""

        cursor = self.head
        while cursor is not None:
            yield cursor
            cursor = cursor.next

    def __iter__(self) -> Iterator[int]:
        for node in self.nodes():
            yield node.value

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"LinkedList({self.list()!r})"
