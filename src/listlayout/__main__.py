"""CLI entry point: run `listlayout FILE --line N --column N` or `python -m listlayout ...`."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    from .refactoring import LIST_KINDS, list_kind_named, refactor_document
    from .shared.errors import ErrorReporter, ListLayoutSourceError
    from .shared.source_location import TextSpan
    from .utils.config import NEWLINE_MARKERS, LayoutOptions
    from .utils.io_utils import read_source_file, write_source_file
    from .workspace import ParsingDocumentProvider, SpacingFormatter

    parser = argparse.ArgumentParser(
        prog="listlayout",
        description="Toggle the argument or parameter list at a position between one line and one item per line.",
    )
    parser.add_argument("file", type=Path, help="Path to the source file")
    parser.add_argument("--line", type=int, required=True, help="1-based line of the cursor")
    parser.add_argument("--column", type=int, default=1, help="1-based column of the cursor (default: 1)")
    parser.add_argument("--kind", choices=[kind.name for kind in LIST_KINDS],
                        help="List kind to toggle (default: the first one available)")
    parser.add_argument("--newline", choices=sorted(NEWLINE_MARKERS),
                        help="Line break used when expanding (default: $LISTLAYOUT_NEWLINE or lf)")
    parser.add_argument("--in-place", action="store_true", help="Rewrite FILE instead of printing the result")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log refactoring decisions")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s: %(message)s")

    path = args.file.resolve()
    if not path.is_file():
        sys.stderr.write(f"listlayout: error: file not found: {path}\n")
        return 2

    try:
        options = LayoutOptions.from_name(args.newline) if args.newline else LayoutOptions.from_env()
        source = read_source_file(path)
    except (OSError, ValueError) as e:
        sys.stderr.write(f"listlayout: error: {e}\n")
        return 2

    provider = ParsingDocumentProvider()
    formatter = SpacingFormatter(provider)
    kinds = [list_kind_named(args.kind)] if args.kind else list(LIST_KINDS)

    try:
        document = provider.open(source, str(path))
    except ListLayoutSourceError as e:
        reporter = ErrorReporter({str(path): source})
        reporter.report_exception(e)
        reporter.print_errors()
        return 2

    span = TextSpan.at(document.syntax_tree.offset_at(args.line, args.column))

    async def run():
        for kind in kinds:
            result = await refactor_document(document, span, kind, provider, formatter, options)
            if result is not None:
                return result
        return None

    result = asyncio.run(run())
    if result is None:
        sys.stderr.write(f"listlayout: no refactoring available at {args.line}:{args.column}\n")
        return 1

    if args.in_place:
        write_source_file(path, result.text)
    else:
        sys.stdout.write(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
