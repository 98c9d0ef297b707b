"""An ordered dictionary on an unbalanced binary search tree with a built-in cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


class _Node:
    __slots__ = ("key", "value", "parent", "left", "right")

    def __init__(self, key: Any, value: Any, parent: _Node | None = None) -> None:
        self.key = key
        self.value = value
        self.parent = parent
        self.left: _Node | None = None
        self.right: _Node | None = None


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _successor(node: _Node) -> _Node | None:
    if node.right is not None:
        return _leftmost(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node, parent = parent, parent.parent
    return parent


def _predecessor(node: _Node) -> _Node | None:
    if node.left is not None:
        return _rightmost(node.left)
    parent = node.parent
    while parent is not None and node is parent.left:
        node, parent = parent, parent.parent
    return parent


class SearchTreeDictionary:
    """A mapping kept in key order by a binary search tree.

    Besides the usual mapping protocol it carries a cursor ("current") that
    can walk the pairs forward from :meth:`begin` or backward from :meth:`end`.
    """

    def __init__(self, pairs: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = ()) -> None:
        self._root: _Node | None = None
        self._current: _Node | None = None
        self._size = 0
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, value in pairs:
            self[key] = value

    # Tree helpers ----------------------------------------------------------

    def _search(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def _transplant(self, old: _Node, new: _Node | None) -> None:
        if old.parent is None:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def _in_order(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _pre_order(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    # Mapping protocol ------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self._search(key) is not None

    def __getitem__(self, key: Any) -> Any:
        node = self._search(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        parent: _Node | None = None
        node = self._root
        while node is not None:
            if key == node.key:
                node.value = value
                return
            parent = node
            node = node.left if key < node.key else node.right
        fresh = _Node(key, value, parent)
        if parent is None:
            self._root = fresh
        elif key < parent.key:
            parent.left = fresh
        else:
            parent.right = fresh
        self._size += 1

    def __delitem__(self, key: Any) -> None:
        target = self._search(key)
        if target is None:
            raise KeyError(key)
        if self._current is target:
            self._current = None
        if target.left is None:
            self._transplant(target, target.right)
        elif target.right is None:
            self._transplant(target, target.left)
        else:
            heir = _leftmost(target.right)
            if heir.parent is not target:
                self._transplant(heir, heir.right)
                heir.right = target.right
                heir.right.parent = heir
            self._transplant(target, heir)
            heir.left = target.left
            heir.left.parent = heir
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        for node in self._in_order():
            yield node.key

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        for node in self._in_order():
            yield node.key, node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchTreeDictionary):
            return NotImplemented
        return list(self.items()) == list(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(f"{key} : {value}\n" for key, value in self.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"

    def copy(self) -> SearchTreeDictionary:
        """Return a deep copy with the same tree shape and no current pair."""
        duplicate = type(self)()
        for node in self._pre_order():
            duplicate[node.key] = node.value
        return duplicate

    def clear(self) -> None:
        """Remove every pair."""
        self._root = None
        self._current = None
        self._size = 0

    # Cursor ----------------------------------------------------------------

    def has_current(self) -> bool:
        """Return whether the cursor points at a pair."""
        return self._current is not None

    def _require_current(self, operation: str) -> _Node:
        if self._current is None:
            raise LookupError(f"{operation}(): current undefined")
        return self._current

    def current_key(self) -> Any:
        """Return the key at the cursor."""
        return self._require_current("current_key").key

    def current_value(self) -> Any:
        """Return the value at the cursor."""
        return self._require_current("current_value").value

    def set_current_value(self, value: Any) -> None:
        """Overwrite the value at the cursor."""
        self._require_current("set_current_value").value = value

    def begin(self) -> None:
        """Place the cursor at the smallest key; does nothing when empty."""
        if self._root is not None:
            self._current = _leftmost(self._root)

    def end(self) -> None:
        """Place the cursor at the largest key; does nothing when empty."""
        if self._root is not None:
            self._current = _rightmost(self._root)

    def next(self) -> None:
        """Advance the cursor; past the last pair it becomes undefined."""
        self._current = _successor(self._require_current("next"))

    def prev(self) -> None:
        """Move the cursor back; before the first pair it becomes undefined."""
        self._current = _predecessor(self._require_current("prev"))

    # Other -----------------------------------------------------------------

    def pre_string(self) -> str:
        """Return the keys in pre-order, one per line."""
        return "".join(f"{node.key}\n" for node in self._pre_order())