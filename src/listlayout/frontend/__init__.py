"""Frontend: grammar, parser and syntax-tree construction."""

from .parser import Parser, ParseError

__all__ = ["Parser", "ParseError"]
