"""
listlayout transformers
=======================

Lark parse tree -> syntax tree conversion and trivia attachment.
"""

from .base import SyntaxTreeTransformer, COMPILATION_UNIT
from .trivia import TriviaAssignment, assign_trivia, scan_trivia, split_at_line_break

__all__ = [
    'SyntaxTreeTransformer',
    'COMPILATION_UNIT',
    'TriviaAssignment',
    'assign_trivia',
    'scan_trivia',
    'split_at_line_break',
]
