"""
Formatter

Normalizes the spacing of argument and parameter lists inside a span. It is
the pass that runs after a list has been collapsed.
"""

from __future__ import annotations

import logging
from typing import List, Protocol

from ..refactoring.list_kinds import LIST_KINDS
from ..shared.source_location import TextSpan
from ..shared.syntax import (
    LocatedNode, SyntaxElement, SyntaxNode, SyntaxToken, Trivia, TriviaList, is_whitespace_only,
)
from .document import Document, DocumentProvider

logger = logging.getLogger(__name__)

_SINGLE_SPACE: TriviaList = (Trivia.whitespace(" "),)


class Formatter(Protocol):
    """Reformats part of a document."""

    async def format(self, document: Document, span: TextSpan) -> Document:
        """Return ``document`` with the text inside ``span`` formatted."""
        ...


class SpacingFormatter:
    """
    Spacing rules for delimited lists fully covered by the span:

    - nothing after the opening delimiter or before the closing one
    - nothing before a separator, one space after it

    A boundary is only rewritten when it holds nothing but spaces and tabs;
    line breaks and comments are left where they are.
    """

    def __init__(self, document_provider: DocumentProvider):
        self.document_provider = document_provider
        self.list_kinds = {kind.list_kind: kind for kind in LIST_KINDS}

    async def format(self, document: Document, span: TextSpan) -> Document:
        tree = await self.document_provider.get_syntax_tree(document)
        root = self._format_node(tree.root_node, span)
        if root is tree.root:
            return document
        logger.debug("formatted %s in %s", span, document.path)
        return self.document_provider.with_syntax_tree(document, tree.replace_node(tree.root, root))

    def _format_node(self, located: LocatedNode, span: TextSpan) -> SyntaxNode:
        node = located.node
        full = located.full_span
        if full.end <= span.start or full.start >= span.end:
            return node

        children: List[SyntaxElement] = []
        changed = False
        for element, offset in located.children():
            if isinstance(element, SyntaxNode):
                updated = self._format_node(LocatedNode(element, offset, located), span)
                changed = changed or updated is not element
                element = updated
            children.append(element)

        if node.kind in self.list_kinds and span.contains(located.full_span):
            kind = self.list_kinds[node.kind]
            spaced = _space_list(children, kind.separator_kind)
            changed = changed or spaced != children
            children = spaced

        if not changed:
            return node
        return SyntaxNode(kind=node.kind, children=tuple(children))


def _space_list(children: List[SyntaxElement], separator_kind: str) -> List[SyntaxElement]:
    result = list(children)
    for index in range(len(result) - 1):
        left, right = result[index], result[index + 1]
        if not is_whitespace_only(left.trailing_trivia + right.leading_trivia):
            continue
        after_separator = isinstance(left, SyntaxToken) and left.kind == separator_kind
        wanted = _SINGLE_SPACE if after_separator else ()
        if left.trailing_trivia == wanted and not right.leading_trivia:
            continue
        result[index] = left.with_trailing_trivia(wanted)
        result[index + 1] = right.with_leading_trivia(())
    return result
