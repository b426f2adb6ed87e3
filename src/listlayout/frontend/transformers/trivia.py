"""
Trivia Scanner

The grammar ignores whitespace and comments, so the lark tokens only tell us
where the significant text is. Everything between two tokens is trivia; this
module splits those gaps into pieces and decides which token owns each piece.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from lark.lexer import Token

from ...shared.errors import ListLayoutImplementationError
from ...shared.syntax import Trivia, TriviaKind, TriviaList, split_at_line_break

_TRIVIA_PATTERN = re.compile(
    r"(?P<end_of_line>\r\n|\r|\n)"
    r"|(?P<whitespace>[ \t\f]+)"
    r"|(?P<single_line_comment>//[^\r\n]*)"
    r"|(?P<multi_line_comment>/\*.*?\*/)",
    re.DOTALL,
)


def scan_trivia(text: str) -> TriviaList:
    """Split a gap between tokens into trivia pieces."""
    pieces: List[Trivia] = []
    pos = 0
    while pos < len(text):
        match = _TRIVIA_PATTERN.match(text, pos)
        if match is None:
            raise ListLayoutImplementationError(f"non-trivia text between tokens: {text[pos:pos + 20]!r}")
        pieces.append(Trivia(TriviaKind(match.lastgroup), match.group()))
        pos = match.end()
    return tuple(pieces)


@dataclass
class TriviaAssignment:
    """Leading/trailing trivia per token, keyed by the token's start offset."""
    leading: Dict[int, TriviaList] = field(default_factory=dict)
    trailing: Dict[int, TriviaList] = field(default_factory=dict)
    end_of_file: TriviaList = ()

    def for_token(self, token: Token) -> Tuple[TriviaList, TriviaList]:
        return self.leading.get(token.start_pos, ()), self.trailing.get(token.start_pos, ())


def assign_trivia(source: str, tokens: Sequence[Token]) -> TriviaAssignment:
    """Attach every gap of ``source`` to the tokens around it."""
    ordered = sorted(tokens, key=lambda tok: tok.start_pos)
    assignment = TriviaAssignment()
    previous = None
    for token in ordered:
        if previous is None:
            assignment.leading[token.start_pos] = scan_trivia(source[:token.start_pos])
        else:
            trailing, leading = split_at_line_break(scan_trivia(source[previous.end_pos:token.start_pos]))
            assignment.trailing[previous.start_pos] = trailing
            assignment.leading[token.start_pos] = leading
        previous = token

    if previous is None:
        assignment.end_of_file = scan_trivia(source)
    else:
        trailing, leading = split_at_line_break(scan_trivia(source[previous.end_pos:]))
        assignment.trailing[previous.start_pos] = trailing
        assignment.end_of_file = leading
    return assignment
