#!/usr/bin/env python3
"""Command line entry point: write the SOP formula of the stored function to a .tex file."""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from logic import DEFAULT_FUNCTION, N_INPUTS, render_document

log = logging.getLogger(__name__)

DEFAULT_OUTPUT = "text.tex"


class DestinationUnwritableError(OSError):
    """Raised when the output file cannot be opened for writing."""


def write_document(path, text: str) -> Path:
    """Write ``text`` to ``path``; nothing is retried.

    The text goes to a sibling ``.part`` file that replaces ``path`` once
    fully written; on failure neither file is left behind.
    """
    target = Path(path)
    partial = target.with_name(target.name + ".part")
    try:
        with open(partial, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(partial, target)
    except OSError as exc:
        with contextlib.suppress(OSError):
            partial.unlink()
        raise DestinationUnwritableError(f"bad file path: {target}") from exc
    return target


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdnf-latex",
        description="Render the stored truth table as a LaTeX sum of products.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"destination .tex file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    parser.add_argument("--debug", action="store_true", help="log table details")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_argument_parser().parse_args(argv)
    configure_logging(args.verbose, args.debug)

    text = render_document(DEFAULT_FUNCTION, N_INPUTS)
    try:
        target = write_document(args.output, text)
    except DestinationUnwritableError as exc:
        log.error("%s (%s)", exc, exc.__cause__)
        return 1

    log.info("Wrote %d characters to %s", len(text), target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
