#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pandoc filter entry point.

Usage:
    pandoc paper.md --filter lipics-filter -o paper.tex
    pandoc -t json paper.md | lipics-filter latex | pandoc -f json -o paper.tex

Pandoc passes the target format as the first argument; LaTeX-only output
modes are used only when it is ``latex``.
"""

import argparse
import sys

from config.logging_config import setup_logger
from config.settings import settings
from .filter import FilterError, read_document, run_filter, write_document


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lipics-filter",
        description="Resolve knowledges and theorem environments in a pandoc JSON document",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Target renderer (as passed by pandoc); 'latex' enables LaTeX modes",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logger("lipics_filter", level=settings.log_level, log_file=settings.log_file)

    try:
        doc = read_document(sys.stdin)
        run_filter(doc, target=args.target, settings=settings)
        write_document(doc, sys.stdout)
    except FilterError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
