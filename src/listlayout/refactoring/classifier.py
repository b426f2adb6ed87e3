"""
Layout Classifier
"""

from ..shared.syntax import has_line_break
from .delimited_list import DelimitedList


def is_expanded(delimited: DelimitedList) -> bool:
    """True when any separator of the list carries a line break."""
    return any(has_line_break(separator.all_trivia) for separator in delimited.separators)
