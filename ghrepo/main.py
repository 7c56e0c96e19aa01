import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional, TextIO, Tuple

from pydantic import ValidationError

from . import __version__
from .client import GitHubClient
from .config import Settings
from .domain import ApiError, DataIntegrityError, ReportSummary
from .report import write_report

logger = logging.getLogger(__name__)


def configure_logging(verbose: int):
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ghrepo",
        description="Summarize the public repos listed by a GitHub API url",
    )
    p.add_argument(
        "--ghurl",
        default=defaults.ghurl,
        help="github url for getting repos info",
    )
    p.add_argument(
        "--version",
        dest="show_version",
        action="store_true",
        default=defaults.show_version,
        help="show version",
    )
    p.add_argument(
        "--verbose",
        type=int,
        default=defaults.verbose,
        help="verbose level",
    )
    p.add_argument(
        "--ascending",
        action="store_true",
        default=defaults.ascending,
        help="sort ascending",
    )
    p.add_argument(
        "--bypushedat",
        dest="by_pushed_at",
        action="store_true",
        default=defaults.by_pushed_at,
        help="sort by pushed_at field",
    )
    p.add_argument(
        "--byupdatedat",
        dest="by_updated_at",
        action="store_true",
        default=defaults.by_updated_at,
        help="sort by updated_at field (default)",
    )
    return p


def parse_args(
    argv: List[str], defaults: Settings
) -> Tuple[argparse.ArgumentParser, argparse.Namespace, List[str]]:
    parser = build_parser(defaults)
    args, leftover = parser.parse_known_args(argv)
    return parser, args, leftover


async def run(config: Settings, writer: TextIO = sys.stdout) -> ReportSummary:
    """
    Fetch every repo listed at ``config.ghurl`` and write the summary report.

    Nothing is written unless the whole listing was fetched and passed
    validation.
    """
    logger.info(f"🚀 Fetching repos from {config.ghurl}")
    async with GitHubClient() as client:
        repositories = await client.fetch_all(config.ghurl)

    summary = write_report(repositories, config.ghurl, writer, config.sort_spec)
    logger.info(
        f"🎉 Report done: {len(repositories)} repos, "
        f"{summary.total_open_issues} open issues"
    )
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) or "ghrepo"

    try:
        defaults = Settings()
    except ValidationError as e:
        sys.stderr.write(f"invalid GHREPO_ environment settings:\n{e}\n")
        return 1
    parser, args, leftover = parse_args(argv, defaults)
    if leftover:
        sys.stderr.write(f"unrecognized {leftover}\n")
        parser.print_help(sys.stderr)
        return 1

    config = defaults.model_copy(update=vars(args))
    configure_logging(config.verbose)

    if config.verbose > 0:
        print(f"{[prog] + argv} version:{__version__}")
    if config.show_version:
        print(f"./{prog} version={__version__}")

    try:
        asyncio.run(run(config))
    except (ApiError, DataIntegrityError) as e:
        logger.critical(f"💥 {[prog] + argv}: err:{e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
