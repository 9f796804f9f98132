from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from learngraph.adapters.cache import InMemoryCache
from learngraph.app import source_catalog
from learngraph.config import ConfigurationError, configure_logging, get_catalog_config
from learngraph.domain.schema import render_type_definitions

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Source the learning catalog into a node graph")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    source = subparsers.add_parser("source", help="Fetch (or reuse) the catalog and create nodes")
    source.add_argument(
        "--cache-response",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reuse a cached catalog document when present (defaults to config)",
    )
    source.add_argument(
        "--locale",
        type=str,
        help="Catalog locale, part of the cache key (defaults to config)",
    )
    source.add_argument(
        "--force-clear",
        action="store_true",
        default=None,
        help="Ignore any cached catalog document",
    )
    source.add_argument(
        "--memory-cache",
        action="store_true",
        help="Use a process-lifetime cache instead of the persisted one",
    )

    subparsers.add_parser("schema", help="Print the node type definitions")

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    if parsed_args.command == "schema":
        sys.stdout.write(render_type_definitions())
        return

    try:
        config = get_catalog_config(
            cache_response=parsed_args.cache_response,
            locale=parsed_args.locale,
            force_clear=parsed_args.force_clear,
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        result = source_catalog(
            config=config,
            cache=InMemoryCache() if parsed_args.memory_cache else None,
        )
    except Exception:
        log.exception("Fatal error during catalog sourcing")
        sys.exit(1)

    for node_type, count in result.counts.items():
        log.info("%s: %s", node_type, count)
    if not result.succeeded:
        log.warning("Catalog sourcing finished without new nodes: %s", result.error)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
