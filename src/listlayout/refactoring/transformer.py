"""
Layout Transformer

Both directions only touch the trivia at item boundaries. Item content is
never looked at.
"""

import logging
from typing import Optional

from ..shared.syntax import Trivia
from ..utils.config import MIN_LIST_ITEMS, LayoutOptions
from .delimited_list import DelimitedList
from .indentation import derive_indent

logger = logging.getLogger(__name__)


def to_collapsed(delimited: DelimitedList) -> DelimitedList:
    """
    One-line layout: every item loses its leading and trailing trivia.

    Separators come back bare, so ``(a,b)`` is what is left; the formatter
    pass that follows a collapse restores the space after each separator.
    """
    items = [item.without_trivia() for item in delimited.items]
    logger.debug("collapsing %s with %d items", delimited.kind.list_kind, len(items))
    return delimited.rebuilt(items)


def to_expanded(delimited: DelimitedList, options: Optional[LayoutOptions] = None,
                indent: Optional[int] = None) -> DelimitedList:
    """
    One item per line, aligned under the first item.

    The first item keeps its place next to the opening delimiter; every other
    item starts on a new line indented with ``indent`` spaces (by default
    the first item's original column). The closing delimiter is untouched.

    Only item trivia is rewritten: a line break right after the opening
    delimiter stays, so ``Foo(\\n    a, b)`` becomes ``Foo(\\na,\\n    b)``.
    """
    if delimited.item_count < MIN_LIST_ITEMS:
        return delimited

    options = options or LayoutOptions()
    if indent is None:
        indent = derive_indent(delimited)

    padding = (Trivia.end_of_line(options.newline),)
    if indent:
        padding += (Trivia.whitespace(" " * indent),)

    first, *rest = delimited.items
    items = [first.without_trivia()]
    items.extend(item.without_trailing_trivia().with_leading_trivia(padding) for item in rest)
    logger.debug("expanding %s with %d items at column %d", delimited.kind.list_kind, len(items), indent)
    return delimited.rebuilt(items)
