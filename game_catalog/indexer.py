"""
Index Deriver

Builds the tag and genre inverted indices from a finished games collection.
Items are created in first-occurrence order (games by ascending id, values
in stored order) and every occurrence of a value adds one posting, so a game
listing the same tag twice is posted twice.
"""

from typing import Dict, Tuple

from loguru import logger

from .collection import ItemCollection
from .models import Game, Item, resolve_attribute


def derive_index(games: ItemCollection[Game], attribute: str) -> ItemCollection[Item]:
    """Return a new index over the repeated ``attribute`` of ``games``."""
    spec = resolve_attribute(attribute)
    if spec.kind != "multiple":
        raise ValueError(f"Cannot index scalar attribute {attribute!r}")
    index: ItemCollection[Item] = ItemCollection()
    by_name: Dict[str, Item] = {}

    for game in games:
        for value in getattr(game, spec.slot):
            item = by_name.get(value)
            if item is None:
                item = Item(name=value, games=[game.id])
                index.append(item)
                by_name[value] = item
            else:
                item.games.append(game.id)

    logger.debug(f"Derived {index.count} {spec.slot} from {games.count} games.")
    return index


def derive_indices(
    games: ItemCollection[Game],
) -> Tuple[ItemCollection[Item], ItemCollection[Item]]:
    """Return the (tags, genres) indices of ``games``."""
    return derive_index(games, "tags"), derive_index(games, "genres")
