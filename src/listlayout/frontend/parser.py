"""
Parser

Source text -> ``SyntaxTree``. Stands in for the host's parser: the layout
core only consumes the trees it produces.
"""

from typing import Optional
from pathlib import Path
from lark import Lark
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken
import logging

from ..shared.errors import ListLayoutSourceError
from ..shared.source_location import SourceLocation
from ..shared.syntax import SyntaxTree
from ..utils.config import DEFAULT_PARSER_CACHE_FILE, DEFAULT_SOURCE_NAME
from .transformers.base import SyntaxTreeTransformer

logger = logging.getLogger("listlayout.frontend.parser")


class Parser:
    """
    Trivia-preserving parser for the C-family source subset.

    - Takes source text, returns an immutable ``SyntaxTree``
    - Rendering the tree gives back the exact input
    - Lark LALR parser with on-disk grammar caching
    """

    def __init__(self, cache_file: Optional[str] = DEFAULT_PARSER_CACHE_FILE):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self.parser = Lark.open(
            str(grammar_path),
            start='start',
            parser='lalr',              # Required for caching
            cache=cache_file or False,
            propagate_positions=True,
            maybe_placeholders=False,
            keep_all_tokens=True,       # Punctuation is part of the syntax tree
        )

    def parse(self, source: str, source_file: str = DEFAULT_SOURCE_NAME) -> SyntaxTree:
        """
        Parse source text to a syntax tree.

        Raises ParseError when the text is not in the accepted language.
        """
        try:
            tree = self.parser.parse(source)
        except UnexpectedInput as e:
            raise ParseError.from_lark(e, source, source_file) from e

        root = SyntaxTreeTransformer.for_tree(source, tree).transform(tree)
        logger.debug("parsed %s (%d characters)", source_file, len(source))
        return SyntaxTree(root=root, file=source_file)


class ParseError(ListLayoutSourceError):
    """Parse error with source location"""
    def __init__(self, message: str, source_file: str, location: Optional[SourceLocation] = None,
                 source_code: Optional[str] = None, help: Optional[str] = None):
        super().__init__(message, location, error_code="E0001", source_code=source_code, help=help)
        self.source_file = source_file

    @classmethod
    def from_lark(cls, error: UnexpectedInput, source: str, source_file: str) -> "ParseError":
        line = getattr(error, "line", None)
        at_end = isinstance(error, UnexpectedToken) and error.token.type == "$END"
        if isinstance(error, UnexpectedEOF) or at_end or not isinstance(line, int) or line < 1:
            location = SourceLocation.from_offset(source_file, source, len(source))
            return cls("unexpected end of input", source_file, location, source,
                       help=_expected_help(getattr(error, "expected", None)))

        location = SourceLocation(
            file=source_file,
            line=line,
            column=error.column,
            start=getattr(error, "pos_in_stream", 0) or 0,
        )
        if isinstance(error, UnexpectedToken):
            message = f"unexpected token '{error.token}'"
            help_text = _expected_help(error.expected)
        elif isinstance(error, UnexpectedCharacters):
            message = f"unexpected character '{error.char}'"
            help_text = None
        else:
            message = "syntax error"
            help_text = None
        return cls(message, source_file, location, source, help=help_text)


def _expected_help(expected) -> Optional[str]:
    if not expected:
        return None
    names = sorted(str(name) for name in expected)
    return "expected one of: " + ", ".join(names)
