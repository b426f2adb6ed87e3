"""
listlayout utilities package
"""

from .config import LayoutOptions
from .io_utils import read_source_file, write_source_file

__all__ = ["LayoutOptions", "read_source_file", "write_source_file"]
