"""
CLI script for querying the Lodestone.

Sub-commands:
1. profile   - character profile and class progress by character ID
2. search    - character search by name, world or datacenter
3. status    - world status for every datacenter
4. rankings  - weekly or monthly free company leaderboard

Records are printed as YAML; world status is printed as a coloured table.
"""

import argparse
import logging
import sys
from collections.abc import Callable
from enum import Enum

from xiv_lodestone import lodestone, terminal
from xiv_lodestone.catalog import Datacenter, GrandCompany, Language, Server
from xiv_lodestone.config import get_settings
from xiv_lodestone.exceptions import CatalogParseError, LodestoneError
from xiv_lodestone.search import SearchQuery
from xiv_lodestone.standings import FreeCompanyLeaderboardQuery


def _catalog(parse: Callable[[str], Enum]) -> Callable[[str], Enum]:
    def convert(text: str) -> Enum:
        try:
            return parse(text)
        except CatalogParseError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    return convert


def _dump(records: list) -> None:
    terminal.yaml_block([record.model_dump(mode="json") for record in records])


def run_profile(args: argparse.Namespace) -> None:
    profile = lodestone.get_profile(args.character_id)
    terminal.section_header(f"{profile.name} ({profile.server})")
    terminal.yaml_block(profile.model_dump(mode="json"))


def run_search(args: argparse.Namespace) -> None:
    query = SearchQuery()
    if args.name:
        query = query.character(args.name)
    if args.server:
        query = query.server(args.server)
    if args.datacenter:
        query = query.datacenter(args.datacenter)
    for language in args.lang:
        query = query.language(language)
    for grand_company in args.gc:
        query = query.grand_company(grand_company)

    results = lodestone.search(query)
    if not results:
        terminal.warning("No characters found")
        return
    _dump(results)


def run_status(args: argparse.Namespace) -> None:
    terminal.server_status(lodestone.get_server_status())


def run_rankings(args: argparse.Namespace) -> None:
    query = FreeCompanyLeaderboardQuery(
        world_name=args.world,
        dc_group=args.datacenter,
        page=args.page,
        grand_company=args.gc,
    )
    if args.period == "weekly":
        results = lodestone.get_weekly_rankings(query, week=args.offset)
    else:
        results = lodestone.get_monthly_rankings(query, month=args.offset)
    _dump(results)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query FFXIV Lodestone pages")
    commands = parser.add_subparsers(dest="command", required=True)

    profile = commands.add_parser("profile", help="Show a character profile")
    profile.add_argument("character_id", type=int, help="Lodestone character ID")
    profile.set_defaults(handler=run_profile)

    search = commands.add_parser("search", help="Search characters")
    search.add_argument("--name", type=str, help="Character name")
    location = search.add_mutually_exclusive_group()
    location.add_argument("--server", type=_catalog(Server.parse), help="World name")
    location.add_argument("--datacenter", type=_catalog(Datacenter.parse), help="Datacenter name")
    search.add_argument(
        "--lang",
        type=_catalog(Language.parse),
        action="append",
        default=[],
        help="Blog language (ja, en, de, fr); repeatable",
    )
    search.add_argument(
        "--gc",
        type=_catalog(GrandCompany.parse),
        action="append",
        default=[],
        help="Grand company; repeatable",
    )
    search.set_defaults(handler=run_search)

    status = commands.add_parser("status", help="Show world status")
    status.set_defaults(handler=run_status)

    rankings = commands.add_parser("rankings", help="Show the free company leaderboard")
    rankings.add_argument("period", choices=["weekly", "monthly"])
    rankings.add_argument(
        "--offset", type=int, default=None, help="Past week or month (e.g. 202401)"
    )
    rankings.add_argument("--page", type=int, choices=range(1, 6), default=None)
    rankings.add_argument("--world", type=_catalog(Server.parse), default=None)
    rankings.add_argument("--datacenter", type=_catalog(Datacenter.parse), default=None)
    rankings.add_argument("--gc", type=_catalog(GrandCompany.parse), default=None)
    rankings.set_defaults(handler=run_rankings)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
    )

    try:
        args.handler(args)
    except LodestoneError as e:
        terminal.error(str(e))
        sys.exit(1)
    except Exception as e:
        terminal.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
