"""Command-line entry point for the kitty search overlay."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from kittysearch import __version__
from kittysearch.kitty.client import KittyClient, KittyError
from kittysearch.search.engine import SearchEngine, SearchError
from kittysearch.ui.overlay import SearchUI
from kittysearch.ui.screen import Screen

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kitty-fast-search",
        description="Blazing-fast terminal search plugin for Kitty",
    )
    parser.add_argument("-q", "--query", help="Initial search query")
    parser.add_argument(
        "--buffer-size",
        type=int,
        default=1_000_000,
        help="Maximum buffer size to search (in lines)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--case-sensitive", action="store_true", help="Case-sensitive search")
    parser.add_argument("--regex", action="store_true", help="Use regex patterns")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> None:
    client = await KittyClient.create()
    engine = SearchEngine(args.buffer_size, args.case_sensitive, args.regex)
    with Screen() as screen:
        ui = SearchUI(client, engine, screen)
        if args.query is not None:
            ui.set_initial_query(args.query)
        await ui.run()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    logger.info("Starting Kitty Fast Search v%s", __version__)
    try:
        asyncio.run(_run(args))
    except (KittyError, SearchError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())