"""
Data Models for the Game Catalog

Holds the field schema shared by the line classifier, the record assembler
and the renderer, the three field variants a database line can produce, and
the Game / Item records stored in the catalog collections.
"""

from typing import Optional, List, Dict, Union, Literal

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownAttribute


# ---------------------------------------------------------------------------
# Field schema
# ---------------------------------------------------------------------------

class FieldSpec(BaseModel):
    """How one line key is parsed, stored and rendered."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Line key as written in the database")
    kind: Literal["game", "single", "multiple"]
    slot: str = Field(..., description="Game attribute the value is stored in")
    separator: Optional[str] = Field(None, description="Split character for repeated values")
    joiner: Optional[str] = Field(None, description="Join string used when rendering repeated values")


GAME_KEY = "Game"

# Keys in the order they appear in a database block.
FIELD_SCHEMA: Dict[str, FieldSpec] = {
    spec.key: spec
    for spec in [
        FieldSpec(key=GAME_KEY, kind="game", slot="name"),
        FieldSpec(key="Cover", kind="single", slot="cover"),
        FieldSpec(key="Engine", kind="single", slot="engine"),
        FieldSpec(key="Setup", kind="single", slot="setup"),
        FieldSpec(key="Runtime", kind="single", slot="runtime"),
        FieldSpec(key="Store", kind="multiple", slot="store", separator=" ", joiner=" "),
        FieldSpec(key="Hints", kind="single", slot="hints"),
        FieldSpec(key="Genre", kind="multiple", slot="genres", separator=",", joiner=", "),
        FieldSpec(key="Tags", kind="multiple", slot="tags", separator=",", joiner=", "),
        FieldSpec(key="Year", kind="single", slot="year"),
        FieldSpec(key="Dev", kind="single", slot="developer"),
        FieldSpec(key="Pub", kind="single", slot="publisher"),
        FieldSpec(key="Version", kind="single", slot="version"),
        FieldSpec(key="Status", kind="single", slot="status"),
    ]
}

# Case-insensitive attribute names: line keys, slot names, plus "game"/"name".
_ATTRIBUTE_LOOKUP: Dict[str, FieldSpec] = {
    **{spec.key.lower(): spec for spec in FIELD_SCHEMA.values()},
    **{spec.slot.lower(): spec for spec in FIELD_SCHEMA.values()},
}


def resolve_attribute(name: str) -> FieldSpec:
    """Return the FieldSpec addressed by ``name`` (case-insensitive)."""
    spec = _ATTRIBUTE_LOOKUP.get(name.strip().lower())
    if spec is None:
        raise UnknownAttribute(name, sorted(_ATTRIBUTE_LOOKUP))
    return spec


# ---------------------------------------------------------------------------
# Field variants
# ---------------------------------------------------------------------------

class NewGame(BaseModel):
    """A ``Game`` line: starts a new record."""

    model_config = ConfigDict(frozen=True)

    name: str = ""

    @property
    def key(self) -> str:
        return GAME_KEY


class SingleItem(BaseModel):
    """A scalar attribute line (e.g. ``Engine``)."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str = ""


class MultipleItems(BaseModel):
    """A repeated attribute line (``Store``, ``Genre``, ``Tags``)."""

    model_config = ConfigDict(frozen=True)

    key: str
    values: List[str] = Field(default_factory=list)


FieldLine = Union[NewGame, SingleItem, MultipleItems]


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class Game(BaseModel):
    """One game of the catalog."""

    id: int = Field(0, ge=0, description="1-based identity, assigned when appended")
    name: str = Field("", description="Game name")
    cover: str = Field("", description="Cover image file name")
    engine: str = Field("", description="Engine used by the game")
    setup: str = Field("", description="Step(s) to set the game up")
    runtime: str = Field("", description="Runtime or executable in the package")
    store: List[str] = Field(default_factory=list, description="Store URLs")
    hints: str = Field("", description="Free-form hints")
    genres: List[str] = Field(default_factory=list, description="Genres")
    tags: List[str] = Field(default_factory=list, description="Tags")
    year: str = Field("", description="Release year")
    developer: str = Field("", description="Developer")
    publisher: str = Field("", description="Publisher")
    version: str = Field("", description="Game version")
    status: str = Field("", description="Status when last tested")

    def get_field(self, attribute: str) -> FieldLine:
        """Return the field variant for ``attribute`` (case-insensitive)."""
        spec = resolve_attribute(attribute)
        value = getattr(self, spec.slot)
        if spec.kind == "game":
            return NewGame(name=value)
        if spec.kind == "single":
            return SingleItem(key=spec.key, value=value)
        return MultipleItems(key=spec.key, values=list(value))

    def field_values(self, attribute: str) -> List[str]:
        """Return the values of ``attribute`` as a list, scalars included."""
        spec = resolve_attribute(attribute)
        value = getattr(self, spec.slot)
        return list(value) if spec.kind == "multiple" else [value]

    def field_contains(self, attribute: str, needle: str) -> bool:
        """Case-insensitive substring test, per element for repeated attributes."""
        needle = needle.lower()
        return any(needle in value.lower() for value in self.field_values(attribute))

    def to_fields(self) -> List[FieldLine]:
        """Return the fields of this game in database block order."""
        return [self.get_field(key) for key in FIELD_SCHEMA]


class Item(BaseModel):
    """An inverted index entry: a tag or genre and the games carrying it."""

    id: int = Field(0, ge=0, description="1-based identity within its index")
    name: str = Field(..., description="Tag or genre name")
    games: List[int] = Field(default_factory=list, description="Game ids, one per occurrence")

    def field_contains(self, attribute: str, needle: str) -> bool:
        if attribute.strip().lower() != "name":
            raise UnknownAttribute(attribute, ["name"])
        return needle.lower() in self.name.lower()
