"""
Command line entry point.

Usage:
    quadsheet input.csv template.pdf output_dir_or_file

With a single table row the third argument is the output PDF; with
several rows it is a directory that receives one PDF per row and
``merged.pdf``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from quadsheet import __version__
from quadsheet.batch import run_from_paths
from quadsheet.core.errors import QuadsheetError

logger = logging.getLogger("quadsheet")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadsheet",
        description=(
            "Generate one PDF per table row from a template, four template "
            "pages per A4 sheet, and merge them when there are several rows."
        ),
    )
    parser.add_argument("table", type=Path, help="Semicolon-delimited table with 'name' and 'pages' columns")
    parser.add_argument("template", type=Path, help="Template document (PDF or any format PyMuPDF opens)")
    parser.add_argument("output", type=Path, help="Output PDF (one row) or output directory (several rows)")
    parser.add_argument(
        "--row",
        type=int,
        default=None,
        metavar="N",
        help="Only build row N (1-based) and write it to OUTPUT as a file",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.row is not None and args.row < 1:
        parser.error("--row must be 1 or greater")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        result = run_from_paths(args.table, args.template, args.output, row=args.row)
    except QuadsheetError as e:
        logger.error(f"Error: {e}")
        return 1

    if result.warnings:
        logger.info(f"Finished with {len(result.warnings)} warning(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
