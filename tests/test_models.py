"""Tests for the Game and Item models."""

import pytest

from game_catalog.errors import UnknownAttribute
from game_catalog.models import (
    FIELD_SCHEMA,
    Game,
    Item,
    MultipleItems,
    NewGame,
    SingleItem,
    resolve_attribute,
)


def make_game(**kwargs):
    defaults = dict(id=1, name="Stardew Valley", engine="XNA", developer="ConcernedApe",
                    genres=["RPG", "Simulation"], tags=["farming", "pixel art"],
                    store=["https://store.steampowered.com/app/413150/"])
    defaults.update(kwargs)
    return Game(**defaults)


class TestSchema:
    def test_every_slot_exists_on_game(self):
        for spec in FIELD_SCHEMA.values():
            assert spec.slot in Game.model_fields

    def test_resolve_by_key_and_slot(self):
        assert resolve_attribute("Dev").slot == "developer"
        assert resolve_attribute("developer").key == "Dev"
        assert resolve_attribute("pub").slot == "publisher"
        assert resolve_attribute("GENRE").slot == "genres"
        assert resolve_attribute("name").key == "Game"

    def test_resolve_unknown(self):
        with pytest.raises(UnknownAttribute):
            resolve_attribute("rating")

    def test_unknown_attribute_is_key_error(self):
        with pytest.raises(KeyError):
            resolve_attribute("rating")


class TestGame:
    def test_defaults(self):
        game = Game()
        assert game.id == 0
        assert game.name == ""
        assert game.tags == []
        assert game.store == []

    def test_get_field_is_case_insensitive(self):
        game = make_game(year="2016")
        assert game.get_field("Year") == SingleItem(key="Year", value="2016")
        assert game.get_field("yEaR") == SingleItem(key="Year", value="2016")

    def test_get_field_variants(self):
        game = make_game()
        assert game.get_field("game") == NewGame(name="Stardew Valley")
        assert game.get_field("Store") == MultipleItems(
            key="Store", values=["https://store.steampowered.com/app/413150/"]
        )
        assert game.get_field("dev") == SingleItem(key="Dev", value="ConcernedApe")

    def test_field_contains_scalar(self):
        game = make_game()
        assert game.field_contains("engine", "xna")
        assert game.field_contains("Engine", "XN")
        assert not game.field_contains("engine", "FNA")

    def test_field_contains_matches_per_element(self):
        game = make_game(tags=["pixel", "art"])
        assert game.field_contains("tags", "pix")
        # a joined string would contain "pixel--art"
        assert not game.field_contains("tags", "l--a")
        assert not game.field_contains("tags", "pixel, art")

    def test_field_contains_empty_needle_matches(self):
        assert make_game(hints="").field_contains("hints", "")

    def test_field_contains_unknown_attribute(self):
        with pytest.raises(UnknownAttribute):
            make_game().field_contains("rating", "5")

    def test_to_fields_follows_block_order(self):
        fields = make_game().to_fields()
        assert [f.key for f in fields] == list(FIELD_SCHEMA)
        assert fields[0] == NewGame(name="Stardew Valley")


class TestItem:
    def test_field_contains_name(self):
        item = Item(id=1, name="Pixel Art", games=[1])
        assert item.field_contains("name", "pixel")
        assert not item.field_contains("name", "farm")

    def test_field_contains_rejects_other_attributes(self):
        with pytest.raises(UnknownAttribute):
            Item(name="x").field_contains("games", "1")
