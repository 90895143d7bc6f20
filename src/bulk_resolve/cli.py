"""Command-line interface for bulk-resolve."""

import argparse
import logging
import sys
from typing import List, Optional

from bulk_resolve import __version__
from bulk_resolve.config import (
    DEFAULT_CONCURRENCY,
    DEFAULT_TIMEOUT,
    ResolveConfig,
    resolution_strategy,
)
from bulk_resolve.dispatcher import Dispatcher
from bulk_resolve.output import ResultWriter
from bulk_resolve.resolver import BulkResolver
from bulk_resolve.sources import targets_from_argument


def _concurrency(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _timeout(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resolve",
        usage="resolve [options] <file|ip|hostname|stdin>",
        description="Bulk forward and reverse DNS lookups. "
                    "Reads targets from standard input when no target is given.",
    )

    parser.add_argument(
        "target",
        nargs="?",
        help="File of targets (one per line), an IP address or a hostname",
    )

    parser.add_argument(
        "-s",
        dest="servers",
        default="",
        help="comma separated list of custom nameservers",
    )

    parser.add_argument(
        "-6",
        dest="ipv6",
        action="store_true",
        help="include IPv6 addresses",
    )

    parser.add_argument(
        "-c",
        dest="concurrency",
        type=_concurrency,
        default=DEFAULT_CONCURRENCY,
        help=f"max concurrency (default: {DEFAULT_CONCURRENCY})",
    )

    parser.add_argument(
        "--timeout",
        type=_timeout,
        default=DEFAULT_TIMEOUT,
        help=f"Timeout per custom nameserver attempt in seconds (default: {DEFAULT_TIMEOUT})",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log failed lookups and other details to stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"bulk-resolve {__version__}",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ResolveConfig(
        strategy=resolution_strategy(args.servers),
        include_ipv6=args.ipv6,
        concurrency=args.concurrency,
        timeout=args.timeout,
    )
    resolver = BulkResolver(config)
    dispatcher = Dispatcher(resolver.resolve, config.concurrency, ResultWriter())

    try:
        dispatcher.run(targets_from_argument(args.target))
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
