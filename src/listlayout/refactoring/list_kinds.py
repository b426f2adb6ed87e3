"""
List Kinds

The layout algorithm is written once; a ``ListKind`` tells it which syntax
it is working on.
"""

from dataclasses import dataclass
from typing import Tuple

from ..utils.config import COLLAPSE_ACTION_TITLE, EXPAND_ACTION_TITLE


@dataclass(frozen=True)
class ListKind:
    """
    One flavour of delimited list.

    ``head_kinds`` are the nodes that own such a list (an invocation owns its
    argument list, a method declaration its parameter list).
    """
    name: str
    list_kind: str
    item_kind: str
    head_kinds: Tuple[str, ...]
    open_kind: str = "LPAR"
    close_kind: str = "RPAR"
    separator_kind: str = "COMMA"
    separator_text: str = ","

    @property
    def expand_title(self) -> str:
        return EXPAND_ACTION_TITLE.format(items=self.name)

    @property
    def collapse_title(self) -> str:
        return COLLAPSE_ACTION_TITLE.format(items=self.name)


ARGUMENTS = ListKind(
    name="arguments",
    list_kind="argument_list",
    item_kind="argument",
    head_kinds=("invocation", "object_creation", "constructor_initializer"),
)

PARAMETERS = ListKind(
    name="parameters",
    list_kind="parameter_list",
    item_kind="parameter",
    head_kinds=("method_declaration", "constructor_declaration"),
)

LIST_KINDS: Tuple[ListKind, ...] = (ARGUMENTS, PARAMETERS)


def list_kind_named(name: str) -> ListKind:
    for kind in LIST_KINDS:
        if kind.name == name:
            return kind
    raise ValueError(f"unknown list kind {name!r}")
