"""
Syntax Tree Transformer

Converts the lark parse tree into immutable ``SyntaxNode``/``SyntaxToken``
values. The grammar is loaded with ``keep_all_tokens`` so punctuation
survives; trivia comes from ``assign_trivia`` because lark drops it.
"""

import logging
from typing import Sequence

from lark import Transformer, Tree, v_args
from lark.lexer import Token
from typing_extensions import TypeAlias

from ...shared.syntax import EOF_KIND, SyntaxElement, SyntaxNode, SyntaxToken
from .trivia import TriviaAssignment, assign_trivia

LarkMeta: TypeAlias = object

logger: logging.Logger = logging.getLogger(__name__)

COMPILATION_UNIT = "compilation_unit"


class SyntaxTreeTransformer(Transformer):
    """
    Lark Transformer producing the concrete syntax tree.

    Every rule becomes a ``SyntaxNode`` named after the rule (or its alias);
    every token becomes a ``SyntaxToken`` named after its terminal. The
    ``start`` rule is renamed ``compilation_unit`` and closed with a
    zero-width EOF token holding the document's final trivia.
    """

    def __init__(self, trivia: TriviaAssignment) -> None:
        super().__init__(visit_tokens=True)
        self.trivia = trivia

    @classmethod
    def for_tree(cls, source: str, tree: Tree) -> "SyntaxTreeTransformer":
        tokens: Sequence[Token] = list(tree.scan_values(lambda value: isinstance(value, Token)))
        logger.debug("attaching trivia to %d tokens", len(tokens))
        return cls(assign_trivia(source, tokens))

    def __default__(self, data, children, meta: LarkMeta) -> SyntaxNode:
        return SyntaxNode(kind=str(data), children=tuple(children))

    def __default_token__(self, token: Token) -> SyntaxToken:
        leading, trailing = self.trivia.for_token(token)
        return SyntaxToken(kind=token.type, text=str(token), leading_trivia=leading, trailing_trivia=trailing)

    @v_args(inline=True)
    def start(self, *children: SyntaxElement) -> SyntaxNode:
        eof = SyntaxToken(kind=EOF_KIND, text="", leading_trivia=self.trivia.end_of_file)
        return SyntaxNode(kind=COMPILATION_UNIT, children=tuple(children) + (eof,))
