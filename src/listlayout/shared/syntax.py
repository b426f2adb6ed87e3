"""
Syntax Tree

Immutable, persistent concrete syntax tree with trivia.

Nodes and tokens are frozen values with no parent pointers and no absolute
positions, so an unchanged subtree can be shared between snapshots.
Positions and parents are recovered on demand through ``LocatedNode``, a
lightweight cursor created while walking down from the root.

Trivia attachment rule: a token owns, as trailing trivia, everything after
it on the same line up to and including the first line break. Everything
else before the next token is that next token's leading trivia. Trivia at
the end of the document belongs to a zero-width ``EOF`` token.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from functools import cached_property
from typing import Callable, Iterator, Optional, Tuple, Union

from .errors import ListLayoutImplementationError
from .source_location import SourceLocation, TextSpan


EOF_KIND = "EOF"


class TriviaKind(Enum):
    """Trivia categories"""
    WHITESPACE = "whitespace"
    END_OF_LINE = "end_of_line"
    SINGLE_LINE_COMMENT = "single_line_comment"
    MULTI_LINE_COMMENT = "multi_line_comment"


@dataclass(frozen=True)
class Trivia:
    """Non-semantic text attached to a token."""
    kind: TriviaKind
    text: str

    @classmethod
    def whitespace(cls, text: str) -> Trivia:
        return cls(TriviaKind.WHITESPACE, text)

    @classmethod
    def end_of_line(cls, text: str = "\n") -> Trivia:
        return cls(TriviaKind.END_OF_LINE, text)

    @property
    def is_end_of_line(self) -> bool:
        return self.kind is TriviaKind.END_OF_LINE


TriviaList = Tuple[Trivia, ...]


def trivia_text(trivia: TriviaList) -> str:
    return "".join(t.text for t in trivia)


def has_line_break(trivia: TriviaList) -> bool:
    return any(t.is_end_of_line for t in trivia)


def is_whitespace_only(trivia: TriviaList) -> bool:
    return all(t.kind is TriviaKind.WHITESPACE for t in trivia)


def split_at_line_break(trivia: TriviaList) -> Tuple[TriviaList, TriviaList]:
    """Split after the first line break: (same-line part, rest)."""
    for index, piece in enumerate(trivia):
        if piece.is_end_of_line:
            return trivia[:index + 1], trivia[index + 1:]
    return trivia, ()


@dataclass(frozen=True)
class SyntaxToken:
    """
    A lexical token and the trivia around it.

    ``kind`` is the terminal name produced by the grammar (``COMMA``,
    ``LPAR``, ``NAME``...).
    """
    kind: str
    text: str
    leading_trivia: TriviaList = ()
    trailing_trivia: TriviaList = ()

    @property
    def full_width(self) -> int:
        return len(trivia_text(self.leading_trivia)) + len(self.text) + len(trivia_text(self.trailing_trivia))

    @property
    def full_text(self) -> str:
        return trivia_text(self.leading_trivia) + self.text + trivia_text(self.trailing_trivia)

    @property
    def all_trivia(self) -> TriviaList:
        return self.leading_trivia + self.trailing_trivia

    def with_leading_trivia(self, trivia: TriviaList) -> SyntaxToken:
        return replace(self, leading_trivia=tuple(trivia))

    def with_trailing_trivia(self, trivia: TriviaList) -> SyntaxToken:
        return replace(self, trailing_trivia=tuple(trivia))


@dataclass(frozen=True)
class SyntaxNode:
    """
    An interior node: a grammar rule name and its ordered children.

    Equality is structural; identity (``is``) is what ``SyntaxTree.replace_node``
    uses to find the node to swap.
    """
    kind: str
    children: Tuple[SyntaxElement, ...] = ()

    @cached_property
    def full_width(self) -> int:
        return sum(child.full_width for child in self.children)

    @property
    def full_text(self) -> str:
        return "".join(child.full_text for child in self.children)

    @property
    def text(self) -> str:
        """Text without the outer leading and trailing trivia."""
        full = self.full_text
        lead = len(trivia_text(self.leading_trivia))
        trail = len(trivia_text(self.trailing_trivia))
        return full[lead:len(full) - trail]

    def child_nodes(self) -> Iterator[SyntaxNode]:
        for child in self.children:
            if isinstance(child, SyntaxNode):
                yield child

    def tokens(self) -> Iterator[SyntaxToken]:
        """Descendant tokens in source order."""
        for child in self.children:
            if isinstance(child, SyntaxToken):
                yield child
            else:
                yield from child.tokens()

    def first_token(self) -> Optional[SyntaxToken]:
        return next(self.tokens(), None)

    def last_token(self) -> Optional[SyntaxToken]:
        last = None
        for last in self.tokens():
            pass
        return last

    @property
    def leading_trivia(self) -> TriviaList:
        first = self.first_token()
        return first.leading_trivia if first is not None else ()

    @property
    def trailing_trivia(self) -> TriviaList:
        last = self.last_token()
        return last.trailing_trivia if last is not None else ()

    def with_leading_trivia(self, trivia: TriviaList) -> SyntaxNode:
        return self._map_edge_token(0, lambda tok: tok.with_leading_trivia(trivia))

    def with_trailing_trivia(self, trivia: TriviaList) -> SyntaxNode:
        return self._map_edge_token(-1, lambda tok: tok.with_trailing_trivia(trivia))

    def without_leading_trivia(self) -> SyntaxNode:
        return self.with_leading_trivia(())

    def without_trailing_trivia(self) -> SyntaxNode:
        return self.with_trailing_trivia(())

    def without_trivia(self) -> SyntaxNode:
        return self.without_leading_trivia().without_trailing_trivia()

    def _map_edge_token(self, edge: int, fn: Callable[[SyntaxToken], SyntaxToken]) -> SyntaxNode:
        """Rebuild the path to the first (edge=0) or last (edge=-1) token."""
        order = range(len(self.children)) if edge == 0 else range(len(self.children) - 1, -1, -1)
        for index in order:
            child = self.children[index]
            if isinstance(child, SyntaxToken):
                updated: SyntaxElement = fn(child)
            elif child.first_token() is not None:
                updated = child._map_edge_token(edge, fn)
            else:
                continue
            children = self.children[:index] + (updated,) + self.children[index + 1:]
            return replace(self, children=children)
        return self


SyntaxElement = Union[SyntaxNode, SyntaxToken]


@dataclass(frozen=True)
class LocatedNode:
    """
    A node together with its absolute position and parent chain.

    ``position`` is the start of the node's full span (trivia included).
    """
    node: SyntaxNode
    position: int
    parent: Optional[LocatedNode] = None

    @property
    def kind(self) -> str:
        return self.node.kind

    @property
    def full_span(self) -> TextSpan:
        return TextSpan(self.position, self.position + self.node.full_width)

    @property
    def span(self) -> TextSpan:
        start = self.position + len(trivia_text(self.node.leading_trivia))
        end = self.position + self.node.full_width - len(trivia_text(self.node.trailing_trivia))
        return TextSpan(start, max(start, end))

    def children(self) -> Iterator[Tuple[SyntaxElement, int]]:
        """Children with the absolute start of their full span."""
        offset = self.position
        for child in self.node.children:
            yield child, offset
            offset += child.full_width

    def child(self, node: SyntaxNode) -> LocatedNode:
        for element, offset in self.children():
            if element is node:
                return LocatedNode(node, offset, self)
        raise ListLayoutImplementationError(f"'{node.kind}' is not a child of '{self.kind}'")

    def ancestors_and_self(self) -> Iterator[LocatedNode]:
        current: Optional[LocatedNode] = self
        while current is not None:
            yield current
            current = current.parent


@dataclass(frozen=True)
class SyntaxTree:
    """
    A parsed document snapshot.

    Rendering ``text`` reproduces the parsed source byte for byte.
    """
    root: SyntaxNode
    file: str = "<source>"

    @cached_property
    def text(self) -> str:
        return self.root.full_text

    @property
    def root_node(self) -> LocatedNode:
        return LocatedNode(self.root, 0)

    def find_node(self, span: TextSpan) -> Optional[LocatedNode]:
        """
        Smallest node whose full span contains ``span``.

        A caret at a boundary belongs to the element that starts there.
        Returns None when the span lies outside the document.
        """
        current = self.root_node
        if not current.full_span.contains(span):
            return None
        while True:
            descended = False
            for element, offset in current.children():
                end = offset + element.full_width
                if span.is_empty:
                    inside = offset <= span.start < end
                else:
                    inside = offset <= span.start and span.end <= end
                if not inside:
                    continue
                if isinstance(element, SyntaxNode):
                    current = LocatedNode(element, offset, current)
                    descended = True
                break
            if not descended:
                return current

    def replace_node(self, old: SyntaxNode, new: SyntaxNode) -> SyntaxTree:
        """New tree with ``old`` (matched by identity) swapped for ``new``."""
        if self.root is old:
            return replace(self, root=new)
        updated = _replace_in(self.root, old, new)
        if updated is None:
            raise ListLayoutImplementationError(f"node '{old.kind}' is not part of the tree")
        return replace(self, root=updated)

    def column_at(self, position: int) -> int:
        """0-based column of ``position``; every character counts as one column."""
        text = self.text
        line_start = max(text.rfind("\n", 0, position), text.rfind("\r", 0, position)) + 1
        return position - line_start

    def offset_at(self, line: int, column: int) -> int:
        """Character offset of a 1-based line/column pair, clamped to the document."""
        lines = self.text.splitlines(keepends=True)
        offset = sum(len(chunk) for chunk in lines[:max(line - 1, 0)])
        if 0 < line <= len(lines):
            current = lines[line - 1].rstrip("\r\n")
            offset += min(max(column - 1, 0), len(current))
        return min(offset, len(self.text))

    def location_of(self, position: int) -> SourceLocation:
        return SourceLocation.from_offset(self.file, self.text, position)


def _replace_in(node: SyntaxNode, old: SyntaxNode, new: SyntaxNode) -> Optional[SyntaxNode]:
    for index, child in enumerate(node.children):
        if not isinstance(child, SyntaxNode):
            continue
        if child is old:
            updated: Optional[SyntaxNode] = new
        else:
            updated = _replace_in(child, old, new)
        if updated is not None:
            return replace(node, children=node.children[:index] + (updated,) + node.children[index + 1:])
    return None
