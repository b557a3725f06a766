"""
Game Database

Loads a flat game database into three collections (games, tags, genres) and
exposes the read-only query surface used by the CLI and by library callers.

Usage:
    db = GameDatabase.from_file("games.db")
    db.get_game_by_name("Stardew Valley")
    db.get_games_by_field("engine", "xna")
    db.get_games_with_tag("roguelike")
"""

import json
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from loguru import logger

from .assembler import assemble
from .collection import ItemCollection
from .fields import dump_lines
from .indexer import derive_indices
from .models import Game, Item


def read_lines(path: Union[str, Path]) -> List[str]:
    """
    Read a database file as a list of lines without terminators.

    Lines end at ``\\n`` only, with a trailing ``\\r`` removed; other Unicode
    line separators are part of the field text.
    """
    with open(path, encoding="utf-8", newline="") as fh:
        lines = fh.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class GameDatabase:
    """Games plus their derived tag and genre indices."""

    def __init__(
        self,
        games: ItemCollection[Game],
        tags: ItemCollection[Item],
        genres: ItemCollection[Item],
    ) -> None:
        self.games = games
        self.tags = tags
        self.genres = genres

    @classmethod
    def from_lines(cls, lines: Iterable[str], strict: bool = True) -> "GameDatabase":
        """Assemble the games from ``lines`` and derive both indices."""
        games = assemble(lines, strict=strict)
        tags, genres = derive_indices(games)
        return cls(games, tags, genres)

    @classmethod
    def from_file(cls, path: Union[str, Path], strict: bool = True) -> "GameDatabase":
        path = Path(path)
        logger.info(f"Loading game database from {path}")
        db = cls.from_lines(read_lines(path), strict=strict)
        logger.info(
            f"Loaded {db.games.count} games, {db.tags.count} tags, {db.genres.count} genres."
        )
        return db

    # ------------------------------------------------------------------
    # Games
    # ------------------------------------------------------------------

    def get_games_count(self) -> int:
        return self.games.count

    def get_game_by_id(self, game_id: int) -> Optional[Game]:
        return self.games.get_by_id(game_id)

    def get_game_by_name(self, name: str) -> Optional[Game]:
        return self.games.get_by_name(name)

    def get_games_by_field(self, attribute: str, needle: str) -> List[Game]:
        """Games whose ``attribute`` contains ``needle`` (case-insensitive)."""
        return self.games.get_by_attribute_substring(attribute, needle)

    def get_games_by_tag(self, tag: str) -> List[Game]:
        return self.games.get_by_tag(tag)

    def get_games_by_genre(self, genre: str) -> List[Game]:
        return self.games.get_by_genre(genre)

    def get_games_with_tag(self, tag: str) -> List[Game]:
        """Games posted under the exact tag ``tag`` in the tag index."""
        return self._games_in(self.tags.get_by_name(tag))

    def get_games_with_genre(self, genre: str) -> List[Game]:
        """Games posted under the exact genre ``genre`` in the genre index."""
        return self._games_in(self.genres.get_by_name(genre))

    def _games_in(self, item: Optional[Item]) -> List[Game]:
        if item is None:
            return []
        # one posting per occurrence, so a game can be listed twice
        ids = dict.fromkeys(item.games)
        return [self.games.get_by_id(game_id) for game_id in ids]

    # ------------------------------------------------------------------
    # Indices
    # ------------------------------------------------------------------

    def get_tags_count(self) -> int:
        return self.tags.count

    def get_genres_count(self) -> int:
        return self.genres.count

    def get_tag_names(self) -> List[str]:
        return self.tags.names()

    def get_genre_names(self) -> List[str]:
        return self.genres.names()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_dict(self, include_indices: bool = False) -> dict[str, Any]:
        """Return a JSON-serialisable view of the catalog."""
        d: dict[str, Any] = {
            "games": _collection_dict(self.games),
        }
        if include_indices:
            d["tags"] = _collection_dict(self.tags)
            d["genres"] = _collection_dict(self.genres)
        return d

    def to_json(self, include_indices: bool = False, indent: int = 2) -> str:
        return json.dumps(self.to_dict(include_indices), indent=indent, ensure_ascii=False)

    def dump_lines(self) -> List[str]:
        """Render the games back to the flat database format."""
        return list(dump_lines(self.games))

    def __repr__(self) -> str:
        return (
            f"<GameDatabase games={self.games.count} "
            f"tags={self.tags.count} genres={self.genres.count}>"
        )


def _collection_dict(collection: ItemCollection) -> dict[str, Any]:
    return {
        "count": collection.count,
        "items": [item.model_dump() for item in collection],
    }


def load_database(path: Union[str, Path], strict: bool = True) -> GameDatabase:
    """Load a database file. Raises FileNotFoundError if it does not exist."""
    return GameDatabase.from_file(path, strict=strict)
