"""
Configuration constants and layout options
"""

import os
import tempfile
from dataclasses import dataclass

# Parser configuration constants (cache under temp dir to avoid cluttering project root)
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "listlayout_grammar.cache")
DEFAULT_SOURCE_NAME = "<source>"

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"

# Line-break markers accepted for expanded lists
NEWLINE_MARKERS = {
    "lf": "\n",
    "crlf": "\r\n",
}
DEFAULT_NEWLINE = "lf"
NEWLINE_ENV_VAR = "LISTLAYOUT_NEWLINE"

# Action titles; "{items}" is the list kind's plural noun
EXPAND_ACTION_TITLE = "Break {items} apart"
COLLAPSE_ACTION_TITLE = "Line-up {items}"

# Minimum number of items for a list to have two layouts
MIN_LIST_ITEMS = 2


@dataclass(frozen=True)
class LayoutOptions:
    """Options for the layout transformer."""
    newline: str = NEWLINE_MARKERS[DEFAULT_NEWLINE]

    def __post_init__(self) -> None:
        if self.newline not in NEWLINE_MARKERS.values():
            raise ValueError(f"unsupported line-break marker {self.newline!r}")

    @classmethod
    def from_name(cls, name: str) -> "LayoutOptions":
        try:
            return cls(newline=NEWLINE_MARKERS[name.lower()])
        except KeyError:
            raise ValueError(
                f"unknown newline style {name!r} (expected one of: {', '.join(NEWLINE_MARKERS)})"
            ) from None

    @classmethod
    def from_env(cls) -> "LayoutOptions":
        """Options from LISTLAYOUT_NEWLINE (lf/crlf), defaulting to lf."""
        return cls.from_name(os.environ.get(NEWLINE_ENV_VAR, DEFAULT_NEWLINE))
