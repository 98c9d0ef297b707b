"""An ordered dictionary on a red-black tree with a built-in cursor."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any


class _Color(Enum):
    BLACK = 0
    RED = 1


class _Node:
    __slots__ = ("key", "value", "color", "parent", "left", "right")

    def __init__(self, key: Any, value: Any, color: _Color) -> None:
        self.key = key
        self.value = value
        self.color = color
        self.parent: _Node = self
        self.left: _Node = self
        self.right: _Node = self


class RedBlackDictionary:
    """A mapping kept in key order by a red-black tree.

    Besides the usual mapping protocol it carries a cursor ("current") that
    can walk the pairs forward from :meth:`begin` or backward from :meth:`end`.
    """

    def __init__(self, pairs: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = ()) -> None:
        self._nil = _Node(None, None, _Color.BLACK)
        self._root = self._nil
        self._current = self._nil
        self._size = 0
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, value in pairs:
            self[key] = value

    # Tree helpers ----------------------------------------------------------

    def _new_node(self, key: Any, value: Any, color: _Color, parent: _Node) -> _Node:
        node = _Node(key, value, color)
        node.parent = parent
        node.left = self._nil
        node.right = self._nil
        return node

    def _search(self, key: Any) -> _Node:
        node = self._root
        while node is not self._nil and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def _leftmost(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _rightmost(self, node: _Node) -> _Node:
        while node.right is not self._nil:
            node = node.right
        return node

    def _successor(self, node: _Node) -> _Node:
        if node.right is not self._nil:
            return self._leftmost(node.right)
        parent = node.parent
        while parent is not self._nil and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def _predecessor(self, node: _Node) -> _Node:
        if node.left is not self._nil:
            return self._rightmost(node.left)
        parent = node.parent
        while parent is not self._nil and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    def _replace_child(self, old: _Node, new: _Node) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        self._replace_child(x, y)
        y.right = x
        x.parent = y

    def _transplant(self, old: _Node, new: _Node) -> None:
        self._replace_child(old, new)
        new.parent = old.parent

    def _insert_fixup(self, z: _Node) -> None:
        red, black = _Color.RED, _Color.BLACK
        while z.parent.color is red:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color is red:
                    z.parent.color = black
                    uncle.color = black
                    grand.color = red
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = black
                    z.parent.parent.color = red
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is red:
                    z.parent.color = black
                    uncle.color = black
                    grand.color = red
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = black
                    z.parent.parent.color = red
                    self._rotate_left(z.parent.parent)
        self._root.color = black

    def _delete_fixup(self, x: _Node) -> None:
        red, black = _Color.RED, _Color.BLACK
        while x is not self._root and x.color is black:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is red:
                    w.color = black
                    x.parent.color = red
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w.left.color is black and w.right.color is black:
                    w.color = red
                    x = x.parent
                else:
                    if w.right.color is black:
                        w.left.color = black
                        w.color = red
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = black
                    w.right.color = black
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.color is red:
                    w.color = black
                    x.parent.color = red
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w.right.color is black and w.left.color is black:
                    w.color = red
                    x = x.parent
                else:
                    if w.left.color is black:
                        w.right.color = black
                        w.color = red
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = black
                    w.left.color = black
                    self._rotate_right(x.parent)
                    x = self._root
        x.color = black

    def _delete(self, z: _Node) -> None:
        y = z
        removed_color = y.color
        if z.left is self._nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is self._nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._leftmost(z.right)
            removed_color = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        if removed_color is _Color.BLACK:
            self._delete_fixup(x)

    def _attach_copy(self, key: Any, value: Any, color: _Color) -> None:
        parent = self._nil
        node = self._root
        while node is not self._nil:
            parent = node
            node = node.left if key < node.key else node.right
        fresh = self._new_node(key, value, color, parent)
        if parent is self._nil:
            self._root = fresh
        elif key < parent.key:
            parent.left = fresh
        else:
            parent.right = fresh
        self._size += 1

    def _in_order(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _pre_order(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not self._nil else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not self._nil:
                stack.append(node.right)
            if node.left is not self._nil:
                stack.append(node.left)

    # Mapping protocol ------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self._search(key) is not self._nil

    def __getitem__(self, key: Any) -> Any:
        node = self._search(key)
        if node is self._nil:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        parent = self._nil
        node = self._root
        while node is not self._nil:
            if key == node.key:
                node.value = value
                return
            parent = node
            node = node.left if key < node.key else node.right
        fresh = self._new_node(key, value, _Color.RED, parent)
        if parent is self._nil:
            self._root = fresh
        elif key < parent.key:
            parent.left = fresh
        else:
            parent.right = fresh
        self._size += 1
        self._insert_fixup(fresh)

    def __delitem__(self, key: Any) -> None:
        target = self._search(key)
        if target is self._nil:
            raise KeyError(key)
        if self._current is target:
            self._current = self._nil
        self._delete(target)
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        for node in self._in_order():
            yield node.key

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        for node in self._in_order():
            yield node.key, node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RedBlackDictionary):
            return NotImplemented
        return list(self.items()) == list(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(f"{key} : {value}\n" for key, value in self.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"

    def copy(self) -> RedBlackDictionary:
        """Return a deep copy with the same shape and colours and no current pair."""
        duplicate = type(self)()
        for node in self._pre_order():
            duplicate._attach_copy(node.key, node.value, node.color)
        return duplicate

    def clear(self) -> None:
        """Remove every pair."""
        self._root = self._nil
        self._current = self._nil
        self._size = 0

    # Cursor ----------------------------------------------------------------

    def has_current(self) -> bool:
        """Return whether the cursor points at a pair."""
        return self._current is not self._nil

    def _require_current(self, operation: str) -> _Node:
        if self._current is self._nil:
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
        if self._root is not self._nil:
            self._current = self._leftmost(self._root)

    def end(self) -> None:
        """Place the cursor at the largest key; does nothing when empty."""
        if self._root is not self._nil:
            self._current = self._rightmost(self._root)

    def next(self) -> None:
        """Advance the cursor; past the last pair it becomes undefined."""
        self._current = self._successor(self._require_current("next"))

    def prev(self) -> None:
        """Move the cursor back; before the first pair it becomes undefined."""
        self._current = self._predecessor(self._require_current("prev"))

    # Other -----------------------------------------------------------------

    def pre_string(self) -> str:
        """Return the keys in pre-order, one per line, red keys marked " (RED)"."""
        return "".join(
            f"{node.key} (RED)\n" if node.color is _Color.RED else f"{node.key}\n"
            for node in self._pre_order()
        )