"""Unit tests for the line classifier and renderer."""

import pytest
from loguru import logger

from game_catalog.errors import UnrecognizedFieldKey
from game_catalog.fields import split_line, parse_line, render_field
from game_catalog.models import NewGame, SingleItem, MultipleItems


@pytest.fixture
def warnings():
    messages = []
    sink_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(sink_id)


class TestSplitLine:
    def test_empty(self):
        assert split_line("") == ("", "")

    def test_no_tab(self):
        assert split_line("notab") == ("notab", "")
        assert split_line("no tab") == ("no tab", "")

    def test_one_tab(self):
        assert split_line("one\ttab") == ("one", "tab")

    def test_extra_tabs_keep_first_two_segments(self, warnings):
        assert split_line("one\ttab\tanother") == ("one", "tab")
        assert len(warnings) == 1
        assert "another" in warnings[0]

    def test_single_tab_does_not_warn(self, warnings):
        split_line("Engine\tFNA")
        assert warnings == []


class TestParseLine:
    def test_game(self):
        assert parse_line("Game\tName of the game") == NewGame(name="Name of the game")

    def test_single(self):
        assert parse_line("Engine\tEngine name") == SingleItem(key="Engine", value="Engine name")

    def test_single_without_value(self):
        assert parse_line("Engine") == SingleItem(key="Engine", value="")

    def test_all_scalar_keys(self):
        for key in ["Cover", "Engine", "Setup", "Runtime", "Hints", "Year",
                    "Dev", "Pub", "Version", "Status"]:
            assert parse_line(f"{key}\tx") == SingleItem(key=key, value="x")

    def test_tags_split_on_commas(self):
        assert parse_line("Tags\ttag1, tag2") == MultipleItems(key="Tags", values=["tag1", "tag2"])

    def test_genre_values_trimmed(self):
        field = parse_line("Genre\t first ,second  ")
        assert field == MultipleItems(key="Genre", values=["first", "second"])

    def test_store_split_on_spaces(self):
        field = parse_line("Store\turl1 url2")
        assert field == MultipleItems(key="Store", values=["url1", "url2"])

    def test_store_commas_are_not_separators(self):
        field = parse_line("Store\ta,b c")
        assert field.values == ["a,b", "c"]

    def test_blank_repeated_value_is_empty_list(self):
        assert parse_line("Tags") == MultipleItems(key="Tags", values=[])
        assert parse_line("Genre\t  ") == MultipleItems(key="Genre", values=[])

    def test_duplicates_kept_as_authored(self):
        assert parse_line("Tags\ta, a").values == ["a", "a"]

    def test_unknown_key(self):
        with pytest.raises(UnrecognizedFieldKey) as exc:
            parse_line("Let's fail")
        assert exc.value.key == "Let's fail"

    def test_keys_are_case_sensitive(self):
        with pytest.raises(UnrecognizedFieldKey):
            parse_line("engine\tFNA")


class TestRenderField:
    @pytest.mark.parametrize("line", [
        "Game\tToto",
        "Engine\tToto",
        "Engine\t",
        "Tags\ttag1, tag2",
        "Genre\tGe1, Ge2",
        "Store\turl1 url2",
    ])
    def test_canonical_lines_render_unchanged(self, line):
        assert render_field(parse_line(line)) == line

    def test_render_normalizes_whitespace(self):
        assert render_field(parse_line("Tags\ta ,b,  c")) == "Tags\ta, b, c"
        assert render_field(parse_line("Engine")) == "Engine\t"

    @pytest.mark.parametrize("field", [
        NewGame(name="Foo"),
        NewGame(name=""),
        SingleItem(key="Year", value="2011"),
        MultipleItems(key="Tags", values=["indie", "2d"]),
        MultipleItems(key="Genre", values=[]),
        MultipleItems(key="Store", values=["https://a.example/x", "https://b.example/y"]),
    ])
    def test_parse_of_render_is_identity(self, field):
        assert parse_line(render_field(field)) == field

    def test_render_unknown_repeated_key(self):
        with pytest.raises(UnrecognizedFieldKey):
            render_field(MultipleItems(key="Panic", values=["a"]))
