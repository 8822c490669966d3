"""Command line front end: source file in, IR text out."""

from __future__ import annotations

import argparse
import pprint
import sys
from pathlib import Path
from typing import Optional, Sequence

from .codegen import Codegen
from .error import ParseFailure
from .parser import parse


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line options."""
    parser = argparse.ArgumentParser(
        prog="toyfront", description="Compile a toy-language source file to IR text."
    )
    parser.add_argument("--input", type=Path, required=True, help="Path to the input file")
    parser.add_argument("--output", type=Path, required=True, help="Path to the output file")
    parser.add_argument(
        "--print-ast", action="store_true", help="Also print AST to console"
    )
    return parser.parse_args(argv)


def run(argv: Optional[Sequence[str]] = None) -> None:
    """Compile the input file; raise RuntimeError on unreadable or invalid input."""
    args = parse_args(argv)
    try:
        source = args.input.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RuntimeError(f"Failed to read input file: {args.input}") from exc

    try:
        program = parse(source)
    except ParseFailure as failure:
        reports = "\n".join(error.report(source) for error in failure.errors)
        raise RuntimeError(
            f"Parsing failed with {len(failure.errors)} errors:\n{reports}"
        ) from failure

    if args.print_ast:
        print(pprint.pformat(program))

    generator = Codegen()
    generator.gen(program)
    generator.write(args.output)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the compiler and return the process exit status."""
    try:
        run(argv)
    except RuntimeError as exc:
        message = str(exc)
        cause = exc.__cause__
        if isinstance(cause, (OSError, UnicodeDecodeError)):
            message += f"\n\nCaused by:\n    {cause}"
        print(f"Error: {message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())