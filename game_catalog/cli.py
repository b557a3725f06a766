"""
game-catalog — query and export a flat game database from the command line.

Usage:
    game-catalog search engine xna --db games.db
    game-catalog export --indices
    game-catalog tags
    game-catalog genres

The database defaults to $GAME_CATALOG_DB when --db is not given.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .config import configured_db_path, configured_log_level
from .database import GameDatabase, load_database
from .errors import CatalogError


def _configure_logging() -> None:
    logger.remove()
    logger.add(sys.stderr, level=configured_log_level())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="game-catalog",
        description="Query and export a flat, tab-delimited game database.",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--db", type=Path, default=None, metavar="PATH",
                        help="Database file (default: $GAME_CATALOG_DB)")
    common.add_argument("--lenient", action="store_true",
                        help="Skip malformed lines instead of aborting the load")

    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", parents=[common],
                            help="List games whose FIELD contains VALUE")
    search.add_argument("field", help="Attribute name, e.g. engine, tags, dev")
    search.add_argument("value", help="Case-insensitive substring to look for")

    export = sub.add_parser("export", parents=[common], help="Dump the games as JSON")
    export.add_argument("--indices", action="store_true",
                        help="Include the tag and genre indices")

    sub.add_parser("tags", parents=[common], help="List tags with their game counts")
    sub.add_parser("genres", parents=[common], help="List genres with their game counts")
    return parser


def _load(args: argparse.Namespace) -> GameDatabase:
    path = args.db or configured_db_path()
    if path is None:
        print("ERROR: no database given. Use --db or set GAME_CATALOG_DB.", file=sys.stderr)
        sys.exit(1)
    if not path.is_file():
        print(f"ERROR: {path} is not a file.", file=sys.stderr)
        sys.exit(1)
    try:
        return load_database(path, strict=not args.lenient)
    except (CatalogError, OSError, UnicodeDecodeError) as e:
        print(f"ERROR: could not load {path}: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    _configure_logging()
    args = _build_parser().parse_args(argv)
    db = _load(args)

    if args.command == "search":
        try:
            games = db.get_games_by_field(args.field, args.value)
        except CatalogError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            sys.exit(1)
        result = {"count": len(games), "items": [g.model_dump() for g in games]}
        print(json.dumps(result, indent=2, ensure_ascii=False))
    elif args.command == "export":
        print(db.to_json(include_indices=args.indices))
    else:
        index = db.tags if args.command == "tags" else db.genres
        for item in index:
            print(f"{item.name}\t{len(item.games)}")


if __name__ == "__main__":
    main()
