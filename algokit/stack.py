"""A LIFO stack that tracks a doubling and halving capacity."""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class Stack(Generic[T]):
    """Last-in, first-out stack.

    The stack reports a capacity the way a growable array would. The first
    push reserves ``initial_capacity`` slots. A push onto a full stack
    doubles the capacity. When ``shrink`` is true, a pop that leaves the
    stack less than a quarter full halves it.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY, shrink: bool = True) -> None:
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be positive")
        self._initial_capacity = initial_capacity
        self._shrink = shrink
        self._items: List[T] = []
        self._capacity = 0

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self._capacity == 0:
            self._capacity = self._initial_capacity
        elif len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        value = self._items.pop()
        if self._shrink and 4 * len(self._items) < self._capacity:
            self._capacity //= 2
        return value

    def peek(self) -> T:
        """Return the top value without removing it; raise IndexError if empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def sort(self, key: Optional[Callable[[T], Any]] = None) -> None:
        """Order the stack so the top holds the smallest value.

        Values with equal keys keep their relative order.
        """
        self._items.sort(key=key, reverse=True)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"