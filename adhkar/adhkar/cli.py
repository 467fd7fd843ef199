"""
Command-line interface for Adhkar.

Usage:
    adhkar duas --search morning --limit 5
    adhkar azkar --category zikr-cat-sahih-muslim
    adhkar categories azkar
    adhkar books
    adhkar hadith bukhari-6306
    adhkar favorite dua-bukhari-6306

Every command prints one JSON object per line.
"""

import argparse
import asyncio
import logging
import sys
from typing import Iterable, Sequence

from pydantic import BaseModel

from adhkar.config import AdhkarSettings, get_settings
from adhkar.models import EntityType
from adhkar.service import AdhkarService


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adhkar",
        description="Supplications and remembrances extracted from the hadith corpus",
    )
    parser.add_argument("--corpus-root", help="Directory holding the corpus collections")
    parser.add_argument("--base-url", help="Fetch the corpus over HTTP from this base URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log scan progress")

    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("duas", "List supplications"), ("azkar", "List remembrances")):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--search", "-s", help="Case-insensitive text search")
        sub.add_argument("--category", "-c", help="Category id or name")
        sub.add_argument("--limit", "-n", type=_non_negative_int, default=20, help="Maximum results (0 for all)")

    categories = commands.add_parser("categories", help="List derived categories")
    categories.add_argument("type", choices=[t.value for t in EntityType])

    commands.add_parser("books", help="List available books")

    hadith = commands.add_parser("hadith", help="Show one hadith")
    hadith.add_argument("id", help="Hadith id, e.g. bukhari-6306")

    favorite = commands.add_parser("favorite", help="Toggle a favorite dua or zikr")
    favorite.add_argument("id", help="Entity id, e.g. dua-bukhari-6306")

    return parser


def _settings_from_args(args: argparse.Namespace) -> AdhkarSettings:
    overrides = {}
    if args.corpus_root:
        overrides["corpus_root"] = args.corpus_root
    if args.base_url:
        overrides["corpus_base_url"] = args.base_url
    if not overrides:
        return get_settings()
    # Explicit arguments take precedence over ADHKAR_* environment variables
    return AdhkarSettings(**overrides)


def _emit(items: Iterable[BaseModel], limit: int = 0) -> int:
    shown = 0
    for item in items:
        if limit and shown >= limit:
            break
        print(item.model_dump_json())
        shown += 1
    return shown


async def run(args: argparse.Namespace, service: AdhkarService) -> int:
    if args.command == "duas":
        duas = await service.get_duas()
        duas = service.filter_duas(service.search_duas(args.search, duas), args.category)
        _emit(duas, args.limit)
    elif args.command == "azkar":
        azkar = await service.get_azkar()
        azkar = service.filter_azkar(service.search_azkar(args.search, azkar), args.category)
        _emit(azkar, args.limit)
    elif args.command == "categories":
        _emit(await service.get_categories(args.type))
    elif args.command == "books":
        _emit(await service.get_available_books())
    elif args.command == "hadith":
        record = await service.get_hadith(args.id)
        if record is None:
            print(f"Hadith not found: {args.id}", file=sys.stderr)
            return 1
        _emit([record])
    elif args.command == "favorite":
        try:
            was_favorite = service.is_favorite(args.id)
            now_favorite = service.toggle_favorite(args.id)
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 2
        if now_favorite == was_favorite:
            print(f"Could not update favorites for {args.id}", file=sys.stderr)
            return 1
        print(f"{args.id}: {'added to' if now_favorite else 'removed from'} favorites")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = _settings_from_args(args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    async def _main() -> int:
        async with AdhkarService(settings) as service:
            return await run(args, service)

    return asyncio.run(_main())


if __name__ == "__main__":
    sys.exit(main())
