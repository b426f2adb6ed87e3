"""
Refactoring Provider

Offers one action per cursor position and list kind: "Break <items> apart"
when the list is on one line, "Line-up <items>" when it is already split.
Nothing is registered when there is no list with at least two items.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, TYPE_CHECKING

from ..shared.source_location import TextSpan
from ..utils.config import LayoutOptions
from .classifier import is_expanded
from .delimited_list import DelimitedList
from .list_kinds import ListKind
from .locator import locate
from .transformer import to_collapsed, to_expanded

if TYPE_CHECKING:
    from ..workspace.document import Document, DocumentProvider
    from ..workspace.formatting import Formatter

logger = logging.getLogger(__name__)


@dataclass
class CodeAction:
    """A titled, deferred edit. Nothing happens until ``apply`` is awaited."""
    title: str
    create_document: Callable[[], Awaitable["Document"]] = field(repr=False)

    async def apply(self) -> "Document":
        return await self.create_document()


@dataclass
class RefactoringContext:
    """What the host asks about (document + cursor) and what it gets back."""
    document: "Document"
    span: TextSpan
    actions: List[CodeAction] = field(default_factory=list)

    def register_refactoring(self, action: CodeAction) -> None:
        self.actions.append(action)


class ListLayoutRefactoringProvider:
    """
    Layout toggle for one list kind.

    Trees and documents are immutable snapshots, so a cancelled task
    (``asyncio.CancelledError`` at either await) leaves nothing half-applied.
    """

    def __init__(self, kind: ListKind, document_provider: "DocumentProvider",
                 formatter: "Formatter", options: Optional[LayoutOptions] = None):
        self.kind = kind
        self.document_provider = document_provider
        self.formatter = formatter
        self.options = options or LayoutOptions()

    async def compute_refactorings(self, context: RefactoringContext) -> None:
        tree = await self.document_provider.get_syntax_tree(context.document)
        delimited = locate(tree, context.span, self.kind)
        if delimited is None:
            return

        document = context.document
        if is_expanded(delimited):
            action = CodeAction(self.kind.collapse_title, lambda: self._collapse(document, delimited))
        else:
            action = CodeAction(self.kind.expand_title, lambda: self._expand(document, delimited))
        logger.debug("offering '%s' at %s", action.title, context.span)
        context.register_refactoring(action)

    async def _collapse(self, document: "Document", delimited: DelimitedList) -> "Document":
        collapsed = to_collapsed(delimited)
        updated = self.document_provider.with_syntax_tree(document, collapsed.replace_in_tree())
        return await self.formatter.format(updated, collapsed.replaced_span())

    async def _expand(self, document: "Document", delimited: DelimitedList) -> "Document":
        expanded = to_expanded(delimited, self.options)
        return self.document_provider.with_syntax_tree(document, expanded.replace_in_tree())


async def refactor_document(document: "Document", span: TextSpan, kind: ListKind,
                            document_provider: "DocumentProvider", formatter: "Formatter",
                            options: Optional[LayoutOptions] = None) -> Optional["Document"]:
    """Compute and apply the layout toggle at ``span``; None when nothing applies."""
    provider = ListLayoutRefactoringProvider(kind, document_provider, formatter, options)
    context = RefactoringContext(document=document, span=span)
    await provider.compute_refactorings(context)
    if not context.actions:
        return None
    return await context.actions[0].apply()
