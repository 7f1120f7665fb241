"""A self-balancing AVL search tree keyed by a user function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    item: T
    height: int = 1
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


def _identity(item: Any) -> Any:
    return item


def _height(node: Optional[_Node[Any]]) -> int:
    return node.height if node is not None else 0


def _difference(node: Optional[_Node[Any]]) -> int:
    if node is None:
        return 0
    return _height(node.right) - _height(node.left)


def _fix_height(node: _Node[Any]) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: _Node[T]) -> _Node[T]:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _fix_height(node)
    _fix_height(pivot)
    return pivot


def _rotate_left(node: _Node[T]) -> _Node[T]:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _fix_height(node)
    _fix_height(pivot)
    return pivot


def _balance(node: _Node[T]) -> _Node[T]:
    _fix_height(node)
    difference = _difference(node)
    if difference == 2:
        if _difference(node.right) < 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    if difference == -2:
        if _difference(node.left) > 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    return node


def _pop_min(node: _Node[T]) -> Tuple[Optional[_Node[T]], _Node[T]]:
    """Detach the leftmost node; return the rebalanced rest and that node."""
    if node.left is None:
        return node.right, node
    node.left, smallest = _pop_min(node.left)
    return _balance(node), smallest


class AVLTree(Generic[T]):
    """Height-balanced binary search tree holding one item per distinct key.

    Items are ordered by ``key(item)``. Lookups, insertions and deletions
    return ``None`` when there is nothing to report.
    """

    def __init__(self, key: Optional[Callable[[T], Any]] = None) -> None:
        self._key = key if key is not None else _identity
        self._root: Optional[_Node[T]] = None
        self._count = 0

    def insert(self, item: T) -> Optional[T]:
        """Add ``item``; return the item it replaced, or None."""
        self._root, replaced = self._insert(self._root, item, self._key(item))
        return replaced

    def _insert(
        self, node: Optional[_Node[T]], item: T, item_key: Any
    ) -> Tuple[_Node[T], Optional[T]]:
        if node is None:
            self._count += 1
            return _Node(item), None
        node_key = self._key(node.item)
        if node_key == item_key:
            replaced = node.item
            node.item = item
            return node, replaced
        if node_key < item_key:
            node.right, replaced = self._insert(node.right, item, item_key)
        else:
            node.left, replaced = self._insert(node.left, item, item_key)
        return _balance(node), replaced

    def find(self, item: T) -> Optional[T]:
        """Return the stored item whose key equals that of ``item``, or None."""
        item_key = self._key(item)
        node = self._root
        while node is not None:
            node_key = self._key(node.item)
            if node_key == item_key:
                return node.item
            node = node.right if node_key < item_key else node.left
        return None

    def delete(self, item: T) -> Optional[T]:
        """Remove the item whose key equals that of ``item``; return it, or None."""
        self._root, removed = self._delete(self._root, self._key(item))
        return removed

    def _delete(
        self, node: Optional[_Node[T]], item_key: Any
    ) -> Tuple[Optional[_Node[T]], Optional[T]]:
        if node is None:
            return None, None
        node_key = self._key(node.item)
        if node_key == item_key:
            self._count -= 1
            if node.right is None:
                return node.left, node.item
            rest, successor = _pop_min(node.right)
            successor.left = node.left
            successor.right = rest
            return _balance(successor), node.item
        if node_key < item_key:
            node.right, removed = self._delete(node.right, item_key)
        else:
            node.left, removed = self._delete(node.left, item_key)
        if removed is None:
            return node, None
        return _balance(node), removed

    def clear(self, destructor: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every item, passing each to ``destructor`` if one is given."""
        if destructor is not None:
            pending: List[_Node[T]] = [self._root] if self._root is not None else []
            while pending:
                node = pending.pop()
                destructor(node.item)
                if node.right is not None:
                    pending.append(node.right)
                if node.left is not None:
                    pending.append(node.left)
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Yield items in post-order, right subtree before left."""
        preorder: List[T] = []
        pending: List[_Node[T]] = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            preorder.append(node.item)
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)
        return reversed(preorder)

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def check(self) -> bool:
        """Return whether every node is balanced and holds its true height."""
        return self._check(self._root) >= 0

    def _check(self, node: Optional[_Node[T]]) -> int:
        if node is None:
            return 0
        left = self._check(node.left)
        right = self._check(node.right)
        if left < 0 or right < 0 or abs(right - left) > 1:
            return -1
        actual = max(left, right) + 1
        return actual if actual == node.height else -1