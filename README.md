# cursorkit

A small collection of classic data structures in plain Python, with no
dependencies outside the standard library:

- `CursorList` (`cursorkit.cursor_list`): a double-ended sequence with a
  cursor that sits *between* elements. You move the cursor, then insert,
  overwrite, erase or search around it.
- `SearchTreeDictionary` (`cursorkit.bst_dictionary`): an ordered mapping
  stored in an unbalanced binary search tree.
- `RedBlackDictionary` (`cursorkit.rb_dictionary`): the same interface,
  stored in a red-black tree that stays balanced.

Both dictionaries keep their keys in sorted order and carry a built-in
cursor for forward and backward walks.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Cursor lists

```python
from cursorkit.cursor_list import CursorList

items = CursorList([1, 2, 3])   # the cursor starts at the back
print(items)            # (1, 2, 3)
print(len(items))       # 3

items.move_front()
items.move_next()       # returns 1; cursor now between 1 and 2
items.insert_before(9)  # (1, 9, 2, 3), cursor between 9 and 2
items.find_next(3)      # returns 4; cursor placed just after 3
```

The cursor position runs from 0 (before the first element) to `len(items)`
(after the last). The operations are:

- access: `front`, `back`, `position`, `peek_next`, `peek_prev`
- moving: `move_front`, `move_back`, `move_next`, `move_prev` (the last two
  return the element passed over)
- editing: `insert_after`, `insert_before`, `set_after`, `set_before`,
  `erase_after`, `erase_before`, `clear`
- searching: `find_next` and `find_prev` return the new cursor position, or
  -1 when the element is not found (the cursor then ends at the back or the
  front)
- `cleanup` removes repeated elements, keeping the first occurrence of
  each, and keeps the cursor between the same retained elements; elements
  must be hashable
- `concat` returns a new list of both lists' elements with the cursor at 0
- `copy` returns a new list with the cursor at the back

A list iterates over its elements and compares equal to another
`CursorList` holding the same elements, wherever the cursors are. The
string form is the elements in parentheses separated by `", "`, or the
empty string for an empty list. An operation that needs an element on a
side of the cursor where there is none, or `front`/`back` on an empty list,
raises `IndexError`.

## Ordered dictionaries

```python
from cursorkit.rb_dictionary import RedBlackDictionary

d = RedBlackDictionary({"banana": 2, "apple": 1})
d["cherry"] = 3

print(list(d))          # ['apple', 'banana', 'cherry']
print(d, end="")        # one "key : value" line per pair, in key order

d.begin()
while d.has_current():
    print(d.current_key(), d.current_value())
    d.next()
```

`SearchTreeDictionary` has exactly the same interface. Either class can be
built from a mapping or an iterable of `(key, value)` pairs; keys must be
mutually comparable with `<` and `==`.

- Mapping protocol: `len`, `in`, `d[key]`, `d[key] = value`, `del d[key]`,
  iteration over keys in order, `items()` yielding pairs in order, `clear()`
  and `copy()` (which keeps the tree shape and, for the red-black tree, the
  colours). A missing key raises `KeyError`.
- Two dictionaries of the same kind are equal when they hold the same pairs.
- Cursor: `begin()` and `end()` place it at the smallest or largest key
  (doing nothing when empty); `next()` and `prev()` move it and make it
  undefined when they step off either end; `has_current()`,
  `current_key()`, `current_value()` and `set_current_value(value)` read
  and write the pair under it. Deleting the current pair makes the cursor
  undefined. Using an undefined cursor raises `LookupError`.
- `pre_string()` lists the keys in tree pre-order, one per line, which
  shows the shape of the tree. `RedBlackDictionary` marks red nodes with a
  trailing ` (RED)`.

## What this package does not do

It is a library only: it installs no command-line tools, and it offers no
arbitrary-precision integer type, shuffling utilities or text-processing
programs. Everything it provides is the three classes described above.