"""Main entry point with CLI."""
import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from doctoscrape.config import Config, __version__, config
from doctoscrape.errors import ScrapeError
from doctoscrape.fetch.client import FetchClient
from doctoscrape.jobs.runner import SearchQuery, SearchRunner
from doctoscrape.logging_conf import setup_logging

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="doctoscrape",
        description="Scrapes Doctolib for available appointments, prints out the matches",
    )
    parser.add_argument(
        "postal_code",
        metavar="POSTAL_CODE",
        help="Postal code in which to perform the search",
    )
    parser.add_argument(
        "-c",
        "--city",
        default="paris",
        metavar="CITY",
        help="City name in which to perform the search (default: paris)",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        action="append",
        default=[],
        metavar="POSTAL_CODE",
        help="Exclude centers at the given postal code (repeatable)",
    )
    parser.add_argument(
        "-p",
        "--pages",
        type=positive_int,
        default=1,
        metavar="NUMBER_OF_PAGES",
        help="Number of search results pages to scrape (default: 1)",
    )
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        help="Skip result elements with a malformed id instead of aborting",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


async def run(query: SearchQuery, skip_malformed: bool) -> None:
    async with FetchClient() as client:
        runner = SearchRunner(client, skip_malformed=skip_malformed)
        await runner.run(query)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    setup_logging("DEBUG" if args.verbose else None)

    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    query = SearchQuery(
        postal_code=args.postal_code,
        city=args.city,
        page_count=args.pages,
        excluded_postal_codes=frozenset(args.exclude),
    )
    skip_malformed = args.skip_malformed or config.SKIP_MALFORMED_IDS

    try:
        asyncio.run(run(query, skip_malformed))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)
    except ScrapeError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
