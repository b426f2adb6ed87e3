"""
Error Reporting

Diagnostics are rendered rustc style::

    error[E0001]: unexpected token ')'
     --> Program.cs:3:17
      |
    3 |     Foo(a, b, );
      |               ^ expected an argument
      |
      = help: remove the trailing separator

Only the parser collaborator and the command-line host produce diagnostics;
the layout core never raises for source it cannot refactor, it simply offers
no action.
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional, List, Dict
from .source_location import SourceLocation


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set or LISTLAYOUT_COLOR=0)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get("LISTLAYOUT_COLOR", "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return sys.stderr.isatty()

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_CYAN   = "\033[36m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color or not codes:
        return text
    return f"{''.join(codes)}{text}{_RESET}"


# ---------------------------------------------------------------------------
# Error dataclass
# ---------------------------------------------------------------------------

@dataclass
class Error:
    """A single diagnostic."""
    message: str
    location: Optional[SourceLocation]
    code: Optional[str] = None
    help: Optional[str] = None
    note: Optional[str] = None
    label: Optional[str] = None


# ---------------------------------------------------------------------------
# Formatting engine
# ---------------------------------------------------------------------------

def _format_diagnostic(error: Error, source_files: Dict[str, str], color: bool = False) -> str:
    code_str = f"[{error.code}]" if error.code else ""
    out: List[str] = [
        _style(f"error{code_str}", _BOLD, _RED, color=color)
        + _style(f": {error.message}", _BOLD, color=color)
    ]

    loc = error.location
    if loc is None:
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + "<unknown location>")
        _append_annotations(out, error, 1, color)
        return "\n".join(out)

    source = source_files.get(loc.file)
    gw = max(len(str(loc.line)), 1)
    out.append(_style(" " * gw + "--> ", _BOLD, _BLUE, color=color) + str(loc))
    if source is None:
        _append_annotations(out, error, gw, color)
        return "\n".join(out)

    src_lines = source.splitlines()
    code_line = src_lines[loc.line - 1] if 0 < loc.line <= len(src_lines) else ""
    gutter = _style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color)
    out.append(gutter)
    out.append(_style(str(loc.line).rjust(gw) + " | ", _BOLD, _BLUE, color=color) + code_line)

    col_start = max(loc.column, 1) - 1
    if loc.end_column > loc.column and loc.end_line in (0, loc.line):
        span_len = loc.end_column - loc.column
    else:
        span_len = _guess_span(code_line, col_start)
    label_suffix = f" {error.label}" if error.label else ""
    carets = " " * col_start + "^" * max(1, span_len) + label_suffix
    out.append(gutter + " " + _style(carets, _BOLD, _RED, color=color))

    _append_annotations(out, error, gw, color)
    return "\n".join(out)


def _guess_span(code_line: str, col_start: int) -> int:
    """Guess token length when end_column is unavailable."""
    length = 0
    for ch in code_line[col_start:]:
        if ch in (" ", "\t", ";", ",", "(", ")", "{", "}"):
            break
        length += 1
    return max(1, length)


def _append_annotations(out: List[str], error: Error, gw: int, color: bool) -> None:
    if not (error.help or error.note):
        return
    pad = " " * (gw + 1)
    out.append(_style(pad + "|", _BOLD, _BLUE, color=color))
    for title, text in (("help", error.help), ("note", error.note)):
        if text:
            out.append(
                _style(f"{pad}= ", _BOLD, _CYAN, color=color)
                + _style(f"{title}: ", _BOLD, color=color)
                + text
            )


# ---------------------------------------------------------------------------
# ErrorReporter
# ---------------------------------------------------------------------------

class ErrorReporter:
    """Collects diagnostics and renders them against the known source files."""

    def __init__(self, source_files: Dict[str, str]):
        self.source_files = source_files
        self.errors: List[Error] = []

    def report_error(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help: Optional[str] = None,
        note: Optional[str] = None,
        label: Optional[str] = None,
    ) -> None:
        self.errors.append(Error(message=message, location=location, code=code,
                                 help=help, note=note, label=label))

    def report_exception(self, exc: "ListLayoutSourceError") -> None:
        if exc.location is not None and exc.source_code is not None:
            self.source_files.setdefault(exc.location.file, exc.source_code)
        self.report_error(exc.message, exc.location, code=exc.error_code,
                          help=exc.help_text, note=exc.note_text, label=exc.label_text)

    def format_error(self, error: Error, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return _format_diagnostic(error, self.source_files, color=use_color)

    def format_all_errors(self, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        parts = [self.format_error(e, color=use_color) for e in self.errors]
        count = len(self.errors)
        summary = f"aborting due to {count} previous error{'s' if count != 1 else ''}"
        parts.append(_style("error", _BOLD, _RED, color=use_color)
                     + _style(f": {summary}", _BOLD, color=use_color))
        return "\n\n".join(parts)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def print_errors(self) -> None:
        if self.errors:
            print(self.format_all_errors(), file=sys.stderr)


# ============================================================================
# Exception Classes
# ============================================================================

class ListLayoutError(Exception):
    """Base exception for all listlayout errors"""
    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"error[E0001]: {self.message}\n --> {self.location}"
        return self.message


class ListLayoutSourceError(ListLayoutError):
    """
    Error in the user's source text (the document being refactored).

    Raised by the parser collaborator when a document cannot be turned into a
    syntax tree. Renders as a full diagnostic when ``source_code`` is known.
    """
    def __init__(self,
                 message: str,
                 location: Optional[SourceLocation] = None,
                 error_code: str = "E0001",
                 source_code: Optional[str] = None,
                 help: Optional[str] = None,
                 note: Optional[str] = None,
                 label: Optional[str] = None):
        super().__init__(message, location)
        self.error_code = error_code
        self.source_code = source_code
        self.help_text = help
        self.note_text = note
        self.label_text = label

    def __str__(self):
        source_files: Dict[str, str] = {}
        if self.source_code is not None and self.location:
            source_files[self.location.file] = self.source_code
        err = Error(
            message=self.message,
            location=self.location,
            code=self.error_code,
            help=self.help_text,
            note=self.note_text,
            label=self.label_text,
        )
        return _format_diagnostic(err, source_files, color=False)


class ListLayoutImplementationError(Exception):
    """
    Error in listlayout itself (not in the user's source).

    Raised when an internal invariant is broken, e.g. replacing a node that
    is not part of the tree.
    """
    def __init__(self, message: str, error_code: str = "E9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"
