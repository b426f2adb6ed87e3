"""
Delimited List

A typed view over an argument or parameter list node:
open delimiter, items separated by separators, close delimiter.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..shared.errors import ListLayoutImplementationError
from ..shared.source_location import TextSpan
from ..shared.syntax import (
    LocatedNode, SyntaxElement, SyntaxNode, SyntaxToken, SyntaxTree,
    split_at_line_break, trivia_text,
)
from .list_kinds import ListKind


@dataclass(frozen=True)
class DelimitedList:
    """
    A delimited list value.

    ``origin`` is the list as it sits in ``tree`` when it was located.
    Lists rebuilt by the layout transformer keep the origin of the list they
    were derived from: that is the node they replace, and the place their
    indentation is measured from.
    """
    node: SyntaxNode
    kind: ListKind
    tree: Optional[SyntaxTree] = None
    origin: Optional[LocatedNode] = None

    def __post_init__(self) -> None:
        _check_shape(self.node, self.kind)

    @classmethod
    def from_located(cls, located: LocatedNode, kind: ListKind, tree: SyntaxTree) -> "DelimitedList":
        return cls(node=located.node, kind=kind, tree=tree, origin=located)

    @classmethod
    def create(cls, kind: ListKind, open_token: SyntaxToken, items: Sequence[SyntaxNode],
               close_token: SyntaxToken) -> "DelimitedList":
        """Build a list with bare separators between ``items``."""
        return cls(node=_build_node(kind, open_token, items, close_token), kind=kind)

    # =========================================================================
    # STRUCTURE
    # =========================================================================

    @property
    def open_token(self) -> SyntaxToken:
        return self.node.children[0]

    @property
    def close_token(self) -> SyntaxToken:
        return self.node.children[-1]

    @property
    def items(self) -> Tuple[SyntaxNode, ...]:
        return tuple(child for child in self.node.children[1:-1] if isinstance(child, SyntaxNode))

    @property
    def separators(self) -> Tuple[SyntaxToken, ...]:
        return tuple(child for child in self.node.children[1:-1] if isinstance(child, SyntaxToken))

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def is_located(self) -> bool:
        return self.origin is not None and self.tree is not None

    def rebuilt(self, items: Sequence[SyntaxNode]) -> "DelimitedList":
        """Same delimiters, new items, same origin."""
        node = _build_node(self.kind, self.open_token, items, self.close_token)
        return DelimitedList(node=node, kind=self.kind, tree=self.tree, origin=self.origin)

    # =========================================================================
    # POSITIONS (original source)
    # =========================================================================

    def origin_item_start(self, index: int) -> int:
        """Absolute start of item ``index`` in the original tree, trivia excluded."""
        if self.origin is None:
            raise ListLayoutImplementationError(f"{self.kind.list_kind} is not attached to a syntax tree")
        seen = 0
        for element, offset in self.origin.children():
            if isinstance(element, SyntaxNode):
                if seen == index:
                    return offset + len(trivia_text(element.leading_trivia))
                seen += 1
        raise IndexError(f"{self.kind.list_kind} has no item {index}")

    def replaced_span(self) -> TextSpan:
        """Full span this list covers once it has replaced its origin."""
        if self.origin is None:
            raise ListLayoutImplementationError(f"{self.kind.list_kind} is not attached to a syntax tree")
        return TextSpan(self.origin.position, self.origin.position + self.node.full_width)

    def replace_in_tree(self) -> SyntaxTree:
        """The origin tree with this list in place of the original one."""
        if not self.is_located:
            raise ListLayoutImplementationError(f"{self.kind.list_kind} is not attached to a syntax tree")
        return self.tree.replace_node(self.origin.node, self.node)


def _build_node(kind: ListKind, open_token: SyntaxToken, items: Sequence[SyntaxNode],
                close_token: SyntaxToken) -> SyntaxNode:
    children: List[SyntaxElement] = [open_token]
    for index, item in enumerate(items):
        if index:
            # A line break opening an item's leading trivia belongs to the
            # separator before it, the same way the parser attaches it.
            trailing, leading = (), item.leading_trivia
            if any(piece.is_end_of_line for piece in leading):
                trailing, leading = split_at_line_break(leading)
            children.append(SyntaxToken(kind.separator_kind, kind.separator_text, trailing_trivia=trailing))
            item = item.with_leading_trivia(leading)
        children.append(item)
    children.append(close_token)
    return SyntaxNode(kind=kind.list_kind, children=tuple(children))


def _check_shape(node: SyntaxNode, kind: ListKind) -> None:
    children = node.children
    if node.kind != kind.list_kind or len(children) < 2:
        raise ListLayoutImplementationError(f"'{node.kind}' is not a {kind.list_kind}")
    if not (_is_token(children[0], kind.open_kind) and _is_token(children[-1], kind.close_kind)):
        raise ListLayoutImplementationError(f"{kind.list_kind} is missing its delimiters")
    inner = children[1:-1]
    for position, element in enumerate(inner):
        expect_item = position % 2 == 0
        if expect_item and not (isinstance(element, SyntaxNode) and element.kind == kind.item_kind):
            raise ListLayoutImplementationError(f"expected {kind.item_kind} at position {position + 1}")
        if not expect_item and not _is_token(element, kind.separator_kind):
            raise ListLayoutImplementationError(f"expected separator at position {position + 1}")
    if inner and len(inner) % 2 == 0:
        raise ListLayoutImplementationError(f"{kind.list_kind} ends with a separator")


def _is_token(element: SyntaxElement, token_kind: str) -> bool:
    return isinstance(element, SyntaxToken) and element.kind == token_kind
