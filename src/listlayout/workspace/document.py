"""
Documents and the document provider

A ``Document`` is an immutable snapshot of one source file. The provider
hands out its syntax tree and turns an edited tree back into a document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from ..frontend.parser import Parser
from ..shared.syntax import SyntaxTree
from ..utils.config import DEFAULT_SOURCE_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """Source text plus the tree it was parsed to, once known."""
    text: str
    path: str = DEFAULT_SOURCE_NAME
    syntax_tree: Optional[SyntaxTree] = field(default=None, compare=False, repr=False)


class DocumentProvider(Protocol):
    """Access to parsed documents."""

    async def get_syntax_tree(self, document: Document) -> SyntaxTree:
        """Return the syntax tree of ``document``."""
        ...

    def with_syntax_tree(self, document: Document, tree: SyntaxTree) -> Document:
        """Return a new document whose content is ``tree``."""
        ...


class ParsingDocumentProvider:
    """Document provider backed by the lark parser."""

    def __init__(self, parser: Optional[Parser] = None):
        self.parser = parser or Parser()

    async def get_syntax_tree(self, document: Document) -> SyntaxTree:
        if document.syntax_tree is not None:
            return document.syntax_tree
        logger.debug("parsing %s", document.path)
        return self.parser.parse(document.text, document.path)

    def with_syntax_tree(self, document: Document, tree: SyntaxTree) -> Document:
        return Document(text=tree.text, path=document.path, syntax_tree=tree)

    def open(self, text: str, path: str = DEFAULT_SOURCE_NAME) -> Document:
        """Parse ``text`` eagerly and return it as a document."""
        return Document(text=text, path=path, syntax_tree=self.parser.parse(text, path))
