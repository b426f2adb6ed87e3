"""
Centralized file I/O utilities.

- Single place for encoding handling
- Line endings are preserved exactly (no universal-newline translation)
"""

from pathlib import Path
from typing import Union

from .config import DEFAULT_FILE_ENCODING


def read_source_file(path: Union[Path, str]) -> str:
    """Read source file with standard encoding, keeping line endings as-is."""
    p = Path(path) if not isinstance(path, Path) else path
    with p.open("r", encoding=DEFAULT_FILE_ENCODING, newline="") as handle:
        return handle.read()


def write_source_file(path: Union[Path, str], text: str) -> None:
    """Write source file with standard encoding, keeping line endings as-is."""
    p = Path(path) if not isinstance(path, Path) else path
    with p.open("w", encoding=DEFAULT_FILE_ENCODING, newline="") as handle:
        handle.write(text)
