"""A cursor list and ordered tree dictionaries with built-in cursors."""

__version__ = "0.1.0"

__all__ = ["bst_dictionary", "cursor_list", "rb_dictionary"]