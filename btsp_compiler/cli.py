"""
Bootstrap compiler – command-line interface
===========================================

Usage
-----
::

    python -m btsp_compiler.cli build SOURCE.btsp [OPTIONS]
    b26c build SOURCE.btsp [OPTIONS]

Options
-------
--output, -o    Base name of the debug artifact (default: ``main``).
--verbose, -v   Enable DEBUG logging on stderr.

Diagnostics are printed on stdout.  A rejected ``build`` prints::

    b26c=1:
    build-properties-valid: 1
    build-path-valid: 0 ("/abs/path/missing.btsp")
    build-path-suffix-valid: 1

and a failed compile prints ``b26c=1`` followed by ``file-opened: 0`` or
``error: <message>``.  The exit status is 0 on success and 1 otherwise.

Examples
--------
::

    b26c build hello.btsp
    b26c build hello.btsp -o hello -v
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .pipeline.assembler import DEFAULT_OUTPUT_NAME, BastAssembler
from .pipeline.markers import SOURCE_SUFFIX

PROG = "b26c"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Bootstrap compiler – parse .btsp source into a debug BAST",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    build = sub.add_parser("build", help="Compile a .btsp source file")
    # Any number is accepted here so the count can be reported as a
    # validation result instead of an argparse usage error.
    build.add_argument("paths", nargs="*", metavar="SOURCE", help=".btsp source file")
    build.add_argument(
        "--output", "-o",
        default=DEFAULT_OUTPUT_NAME,
        metavar="BASE",
        help=f"Debug artifact base name (default: {DEFAULT_OUTPUT_NAME})",
    )
    build.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable verbose (DEBUG) logging",
    )
    return p


def _quoted(text: str) -> str:
    """
    Wrap *text* in double quotes, escaping embedded `"` and `\\` with a
    backslash.

    >>> _quoted('a"b')
    '"a\\\\"b"'
    """
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _validate_build(paths: List[str]) -> Optional[str]:
    """Return the validation diagnostic, or *None* when the build may run."""
    source = paths[0] if paths else ""
    properties_valid = len(paths) == 1
    path_valid = bool(source) and os.path.exists(source)
    suffix_valid = source.endswith(SOURCE_SUFFIX)

    if properties_valid and path_valid and suffix_valid:
        return None
    shown = _quoted(str(Path(source).absolute()))
    return (
        f"{PROG}=1:\n"
        f"build-properties-valid: {int(properties_valid)}\n"
        f'build-path-valid: {int(path_valid)} ({shown})\n'
        f"build-path-suffix-valid: {int(suffix_valid)}"
    )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        # argc counts the program name and positional arguments only
        argc = 1 + sum(1 for arg in argv if not arg.startswith("-"))
        print(f"{PROG} expected 2 or more arguments, instead got {argc}.")
        return 1

    diagnostic = _validate_build(args.paths)
    if diagnostic is not None:
        print(diagnostic)
        return 1

    result = BastAssembler().compile(args.paths[0], args.output)
    if not result.ok:
        print(result.diagnostic())
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
