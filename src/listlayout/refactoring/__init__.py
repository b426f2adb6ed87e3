"""
Layout toggle for argument and parameter lists.
"""

from .list_kinds import ListKind, ARGUMENTS, PARAMETERS, LIST_KINDS, list_kind_named
from .delimited_list import DelimitedList
from .locator import locate
from .classifier import is_expanded
from .indentation import derive_indent
from .transformer import to_collapsed, to_expanded
from .provider import CodeAction, RefactoringContext, ListLayoutRefactoringProvider, refactor_document

__all__ = [
    "ListKind", "ARGUMENTS", "PARAMETERS", "LIST_KINDS", "list_kind_named",
    "DelimitedList",
    "locate", "is_expanded", "derive_indent", "to_collapsed", "to_expanded",
    "CodeAction", "RefactoringContext", "ListLayoutRefactoringProvider", "refactor_document",
]
