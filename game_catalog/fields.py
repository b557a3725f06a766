"""
Line Classifier and Renderer

Turns one database line (``KEY<TAB>VALUE``) into a field variant and back.

Examples:
  "Game\tFoo"            -> NewGame(name="Foo")
  "Engine\tFNA"          -> SingleItem(key="Engine", value="FNA")
  "Tags\tindie, 2d"      -> MultipleItems(key="Tags", values=["indie", "2d"])
  "Store\turl1 url2"     -> MultipleItems(key="Store", values=["url1", "url2"])

``Store`` values are space separated, ``Genre`` and ``Tags`` comma separated.
A repeated key with a blank value (``"Tags"`` or ``"Tags\t "``) parses to an
empty list, not to a list holding one empty string, so blank tags and genres
never reach the indices.  Both parsing and rendering are driven by
``FIELD_SCHEMA``.
"""

from typing import Iterable, Iterator, List, Tuple

from loguru import logger

from .errors import UnrecognizedFieldKey
from .models import (
    FIELD_SCHEMA,
    FieldLine,
    FieldSpec,
    MultipleItems,
    NewGame,
    SingleItem,
)


def split_line(line: str) -> Tuple[str, str]:
    """
    Split a line on its first tab into (key, remainder).

    A line without a tab is all key.  Segments after a second tab are dropped
    with a warning.
    """
    parts = line.split("\t")
    if len(parts) == 1:
        return parts[0], ""
    if len(parts) > 2:
        logger.warning(
            f"Ignoring {parts[2:]!r} in {line!r}. Check the number of tabs in your database"
        )
    return parts[0], parts[1]


def _split_values(spec: FieldSpec, remainder: str) -> List[str]:
    if not remainder.strip():
        return []
    return [value.strip() for value in remainder.split(spec.separator)]


def parse_line(line: str) -> FieldLine:
    """Classify one database line. Raises UnrecognizedFieldKey for unknown keys."""
    key, remainder = split_line(line)
    spec = FIELD_SCHEMA.get(key)
    if spec is None:
        raise UnrecognizedFieldKey(key)
    if spec.kind == "game":
        return NewGame(name=remainder)
    if spec.kind == "single":
        return SingleItem(key=key, value=remainder)
    return MultipleItems(key=key, values=_split_values(spec, remainder))


def render_field(field: FieldLine) -> str:
    """Render a field variant as its canonical database line."""
    if isinstance(field, NewGame):
        return f"{field.key}\t{field.name}"
    if isinstance(field, SingleItem):
        return f"{field.key}\t{field.value}"
    spec = FIELD_SCHEMA.get(field.key)
    if spec is None or spec.kind != "multiple":
        raise UnrecognizedFieldKey(field.key)
    return f"{field.key}\t{spec.joiner.join(field.values)}"


def dump_lines(games: Iterable) -> Iterator[str]:
    """Render games back to database lines, one block per game."""
    for game in games:
        for field in game.to_fields():
            yield render_field(field)
