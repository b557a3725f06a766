"""
Record Assembler

Folds the stream of classified lines into Game records.  A ``Game`` line
opens a new record; every other line sets one attribute on the most recently
opened record.  Repeating a key inside one block overwrites the earlier value.
"""

from typing import Iterable, Optional

from loguru import logger

from .collection import ItemCollection
from .errors import CatalogLoadError, FieldError, InconsistentAssemblerKey, OrphanField
from .fields import parse_line
from .models import FIELD_SCHEMA, FieldLine, Game, MultipleItems, NewGame, SingleItem


def _set_attribute(game: Game, field: FieldLine) -> None:
    expected = "single" if isinstance(field, SingleItem) else "multiple"
    spec = FIELD_SCHEMA.get(field.key)
    if spec is None or spec.kind != expected or spec.slot not in Game.model_fields:
        raise InconsistentAssemblerKey(field.key)
    if isinstance(field, MultipleItems):
        setattr(game, spec.slot, list(field.values))
    else:
        setattr(game, spec.slot, field.value)


def dispatch(field: FieldLine, games: ItemCollection[Game]) -> None:
    """Apply one field to the games collection."""
    if isinstance(field, NewGame):
        games.append(Game(name=field.name))
        return
    current = games.last()
    if current is None:
        raise OrphanField(field)
    _set_attribute(current, field)


def assemble(
    lines: Iterable[str],
    games: Optional[ItemCollection[Game]] = None,
    strict: bool = True,
) -> ItemCollection[Game]:
    """
    Build the games collection from raw database lines.

    Args:
        lines:  Database lines, without line terminators.
        games:  Collection to fill. A new one is created when omitted. The
                lines are assembled on their own first, so the first line
                must be a Game line, and ``games`` is only extended once the
                whole input has been read.
        strict: When True, the first malformed line aborts the load with a
                CatalogLoadError and ``games`` is left untouched. When False,
                malformed lines are logged and skipped.

    Returns:
        The filled games collection.
    """
    staged: ItemCollection[Game] = ItemCollection()
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        try:
            dispatch(parse_line(line), staged)
        except FieldError as e:
            if strict:
                raise CatalogLoadError(line_number, line, e) from e
            skipped += 1
            logger.warning(f"Skipping line {line_number} ({line!r}): {e}")

    if skipped:
        logger.warning(f"Skipped {skipped} malformed line(s) while loading the catalog.")
    logger.debug(f"Assembled {staged.count} games.")
    if games is None:
        return staged
    for game in staged:
        games.append(game)
    return games
