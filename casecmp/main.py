"""Composition root and command-line entry point for casecmp.

This module wires configuration, logging and the process-wide
comparers together, then runs one CLI command:

- compare A B: print -1, 0 or 1
- sort WORD...: print the words, one per line, in comparer order
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from casecmp import defaults
from casecmp.config import load_settings
from casecmp.core.comparer import CaseInsensitiveComparer, CurrentLocaleComparer
from casecmp.core.errors import CaseCompareError

logger = logging.getLogger(__name__)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="casecmp",
        description="Culture-aware, case-insensitive string comparison",
    )
    locale_options = argparse.ArgumentParser(add_help=False)
    group = locale_options.add_mutually_exclusive_group()
    group.add_argument(
        "--locale",
        help="Locale to compare under (default: the configured ambient locale)",
    )
    group.add_argument(
        "--invariant",
        action="store_true",
        help="Use invariant rules regardless of locale",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    compare_parser = subparsers.add_parser(
        "compare", parents=[locale_options], help="Compare two strings"
    )
    compare_parser.add_argument("left")
    compare_parser.add_argument("right")

    sort_parser = subparsers.add_parser(
        "sort", parents=[locale_options], help="Sort words"
    )
    sort_parser.add_argument("words", nargs="+")
    sort_parser.add_argument("--reverse", action="store_true", help="Sort descending")

    return parser


def select_comparer(
    args: argparse.Namespace,
) -> CaseInsensitiveComparer | CurrentLocaleComparer:
    """Pick the comparer requested on the command line."""
    if args.invariant:
        return defaults.default_invariant_comparer()
    if args.locale is not None:
        return defaults.comparer_for(args.locale)
    return defaults.default_comparer()


def main(argv: list[str] | None = None) -> int:
    """Application entry point.

    Exit codes:
        0: Success
        1: Unexpected error
        2: Usage error, invalid configuration or unknown locale
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_format)
        defaults.configure(settings)

        comparer = select_comparer(args)
        logger.debug(f"Using {comparer!r}")
        if args.command == "compare":
            print(comparer.compare(args.left, args.right))
        elif args.command == "sort":
            for word in comparer.sorted(args.words, reverse=args.reverse):
                print(word)
        else:
            logger.error(f"Unknown command: {args.command}")
            return 2
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    except CaseCompareError as e:
        logger.error(f"{e}")
        return 2
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
