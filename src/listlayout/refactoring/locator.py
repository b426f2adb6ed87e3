"""
List Locator

Cursor span -> nearest enclosing delimited list of a given kind.
"""

import logging
from typing import Optional

from ..shared.source_location import TextSpan
from ..shared.syntax import LocatedNode, SyntaxTree
from ..utils.config import MIN_LIST_ITEMS
from .delimited_list import DelimitedList
from .list_kinds import ListKind

logger = logging.getLogger(__name__)


def locate(tree: SyntaxTree, span: TextSpan, kind: ListKind) -> Optional[DelimitedList]:
    """
    Find the list a refactoring at ``span`` applies to.

    Starting from the smallest node containing the span: a head (invocation,
    declaration...) that is its parent or the node itself yields the head's
    own list; otherwise the closest ancestor-or-self list of the right kind
    wins. Lists with fewer than two items have only one layout and are not
    returned.
    """
    node = tree.find_node(span)
    if node is None:
        logger.debug("span %s is outside %s", span, tree.file)
        return None

    located = None
    if node.parent is not None:
        located = _list_of_head(node.parent, kind)
    if located is None:
        located = _list_of_head(node, kind)
    if located is None:
        located = next((a for a in node.ancestors_and_self() if a.kind == kind.list_kind), None)
    if located is None:
        logger.debug("no %s around %s", kind.list_kind, span)
        return None

    found = DelimitedList.from_located(located, kind, tree)
    if found.item_count < MIN_LIST_ITEMS:
        logger.debug("%s at %s has %d item(s)", kind.list_kind, located.span, found.item_count)
        return None
    return found


def _list_of_head(candidate: LocatedNode, kind: ListKind) -> Optional[LocatedNode]:
    if candidate.kind not in kind.head_kinds:
        return None
    for child in candidate.node.child_nodes():
        if child.kind == kind.list_kind:
            return candidate.child(child)
    return None
