"""
Pytest configuration and shared fixtures for all listlayout tests.

Building the LALR tables is the expensive part of the parser, so a single
parser (and the stateless collaborators built on it) is shared per session.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from listlayout.frontend.parser import Parser
from listlayout.workspace import ParsingDocumentProvider, SpacingFormatter


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def parser():
    """Session-scoped parser; parsing keeps no state between calls."""
    return Parser()


@pytest.fixture(scope="session")
def document_provider(parser):
    return ParsingDocumentProvider(parser)


@pytest.fixture(scope="session")
def formatter(document_provider):
    return SpacingFormatter(document_provider)
