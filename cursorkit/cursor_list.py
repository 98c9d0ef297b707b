"""A sequence with a movable cursor that stands between elements."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class CursorList:
    """A double-ended sequence with a cursor between elements.

    The cursor position is an integer from 0 (before the first element)
    to ``len(self)`` (after the last element).
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        self._pos = len(self._items)

    # Python protocols ------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CursorList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self._items:
            return ""
        return "(" + ", ".join(str(item) for item in self._items) + ")"

    def __repr__(self) -> str:
        return f"CursorList({self._items!r}, position={self._pos})"

    def copy(self) -> CursorList:
        """Return a new list with the same elements and the cursor at the back."""
        return CursorList(self._items)

    # Access ----------------------------------------------------------------

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("front(): empty list")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("back(): empty list")
        return self._items[-1]

    def position(self) -> int:
        """Return the cursor position."""
        return self._pos

    def _require_after(self, operation: str) -> None:
        if self._pos >= len(self._items):
            raise IndexError(f"{operation}(): cursor at back")

    def _require_before(self, operation: str) -> None:
        if self._pos <= 0:
            raise IndexError(f"{operation}(): cursor at front")

    def peek_next(self) -> Any:
        """Return the element after the cursor."""
        self._require_after("peek_next")
        return self._items[self._pos]

    def peek_prev(self) -> Any:
        """Return the element before the cursor."""
        self._require_before("peek_prev")
        return self._items[self._pos - 1]

    # Manipulation ----------------------------------------------------------

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()
        self._pos = 0

    def move_front(self) -> None:
        """Move the cursor to position 0."""
        self._pos = 0

    def move_back(self) -> None:
        """Move the cursor to position ``len(self)``."""
        self._pos = len(self._items)

    def move_next(self) -> Any:
        """Advance the cursor one step and return the element passed over."""
        self._require_after("move_next")
        item = self._items[self._pos]
        self._pos += 1
        return item

    def move_prev(self) -> Any:
        """Move the cursor back one step and return the element passed over."""
        self._require_before("move_prev")
        self._pos -= 1
        return self._items[self._pos]

    def insert_after(self, x: Any) -> None:
        """Insert ``x`` just after the cursor."""
        self._items.insert(self._pos, x)

    def insert_before(self, x: Any) -> None:
        """Insert ``x`` just before the cursor."""
        self._items.insert(self._pos, x)
        self._pos += 1

    def set_after(self, x: Any) -> None:
        """Overwrite the element after the cursor."""
        self._require_after("set_after")
        self._items[self._pos] = x

    def set_before(self, x: Any) -> None:
        """Overwrite the element before the cursor."""
        self._require_before("set_before")
        self._items[self._pos - 1] = x

    def erase_after(self) -> None:
        """Delete the element after the cursor."""
        self._require_after("erase_after")
        del self._items[self._pos]

    def erase_before(self) -> None:
        """Delete the element before the cursor."""
        self._require_before("erase_before")
        self._pos -= 1
        del self._items[self._pos]

    # Other operations ------------------------------------------------------

    def find_next(self, x: Any) -> int:
        """Search forward for ``x``; leave the cursor just after it.

        Returns the new cursor position, or -1 with the cursor at the back
        when ``x`` is not found.
        """
        tail = self._items[self._pos:]
        for index, item in enumerate(tail, start=self._pos):
            if item == x:
                self._pos = index + 1
                return self._pos
        self._pos = len(self._items)
        return -1

    def find_prev(self, x: Any) -> int:
        """Search backward for ``x``; leave the cursor just before it.

        Returns the new cursor position, or -1 with the cursor at the front
        when ``x`` is not found.
        """
        head = self._items[: self._pos]
        for index, item in reversed(list(enumerate(head))):
            if item == x:
                self._pos = index
                return self._pos
        self._pos = 0
        return -1

    def cleanup(self) -> None:
        """Remove repeated elements, keeping the frontmost occurrence of each.

        The cursor stays between the same two retained elements.
        """
        seen: set[Any] = set()
        kept: list[Any] = []
        new_pos = 0
        for index, item in enumerate(self._items):
            if item in seen:
                continue
            seen.add(item)
            kept.append(item)
            if index < self._pos:
                new_pos += 1
        self._items = kept
        self._pos = new_pos

    def concat(self, other: CursorList) -> CursorList:
        """Return this list's elements followed by ``other``'s, cursor at 0."""
        joined = CursorList([*self._items, *other._items])
        joined.move_front()
        return joined