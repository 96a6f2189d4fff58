from __future__ import annotations

import argparse
import logging
from typing import Optional

from . import run
from .matchers import load_matchers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Insert the blank Javadoc line Checkstyle's JavadocParagraph check asks for before at-clauses."
    )
    parser.add_argument("log_path", help="Path to the build or checkstyle log to scan")
    parser.add_argument(
        "--matchers",
        dest="matchers_path",
        help="JSON file with extra log formats (see tools/atclause/schemas/matchers.schema.json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every match and patch to stderr")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    matchers = load_matchers(args.matchers_path) if args.matchers_path else None
    run(args.log_path, matchers=matchers)


if __name__ == "__main__":  # pragma: no cover
    main()
