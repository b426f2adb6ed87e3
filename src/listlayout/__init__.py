"""
listlayout: toggle argument and parameter lists between a one-line layout
and a one-item-per-line layout without touching the items themselves.
"""

from .frontend import Parser, ParseError
from .refactoring import (
    ARGUMENTS, PARAMETERS, LIST_KINDS, ListKind, DelimitedList,
    locate, is_expanded, derive_indent, to_collapsed, to_expanded,
    CodeAction, RefactoringContext, ListLayoutRefactoringProvider, refactor_document,
)
from .shared import SyntaxTree, TextSpan
from .utils import LayoutOptions
from .workspace import Document, ParsingDocumentProvider, SpacingFormatter

__version__ = "0.1.0"
