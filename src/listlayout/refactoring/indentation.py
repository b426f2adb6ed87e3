"""
Indentation Deriver
"""

from ..shared.errors import ListLayoutImplementationError
from .delimited_list import DelimitedList


def derive_indent(delimited: DelimitedList) -> int:
    """
    Column continuation items align to when the list is expanded.

    It is the 0-based column of the first item in the source the list was
    located in, measured before any of the list's trivia is rewritten.
    """
    if not delimited.is_located:
        raise ListLayoutImplementationError("indentation is measured on a list located in a syntax tree")
    return delimited.tree.column_at(delimited.origin_item_start(0))
