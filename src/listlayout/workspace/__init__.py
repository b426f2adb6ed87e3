"""Document model, document provider and formatter."""

from .document import Document, DocumentProvider, ParsingDocumentProvider
from .formatting import Formatter, SpacingFormatter

__all__ = ["Document", "DocumentProvider", "ParsingDocumentProvider", "Formatter", "SpacingFormatter"]
