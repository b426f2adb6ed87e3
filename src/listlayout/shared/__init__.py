"""
Shared components: spans, syntax tree values and diagnostics.
"""

from .source_location import SourceLocation, TextSpan
from .errors import (
    Error, ErrorReporter, ListLayoutError, ListLayoutSourceError, ListLayoutImplementationError,
)
from .syntax import (
    EOF_KIND, Trivia, TriviaKind, TriviaList, SyntaxToken, SyntaxNode, SyntaxElement,
    LocatedNode, SyntaxTree, has_line_break, is_whitespace_only, split_at_line_break, trivia_text,
)
