import pytest

from kanaquiz.characters import HIRAGANA, CharacterTable
from kanaquiz.errors import CharacterNotFoundError


def test_table_has_46_entries(table):
    assert len(table) == 46
    assert len(table.all_transliterations()) == 46
    assert len(table.all_characters()) == 46


def test_mapping_is_bijection(table):
    characters = [entry.character for entry in table.entries]
    transliterations = [entry.transliteration for entry in table.entries]
    assert len(set(characters)) == len(characters)
    assert len(set(transliterations)) == len(transliterations)

    for entry in table.entries:
        assert table.character_for(entry.transliteration) == entry.character
        assert table.transliteration_for(entry.character) == entry.transliteration


def test_known_lookups(table):
    assert table.character_for("a") == "あ"
    assert table.character_for("shi") == "し"
    assert table.character_for("n") == "ん"
    assert table.transliteration_for("つ") == "tsu"


def test_unknown_transliteration_raises(table):
    with pytest.raises(CharacterNotFoundError):
        table.character_for("xyz")

    with pytest.raises(KeyError):
        table.transliteration_for("ア")


def test_order_follows_literal_table(table):
    assert table.characters() == tuple(c for c, _ in HIRAGANA)
    assert table.transliterations() == tuple(t for _, t in HIRAGANA)


def test_contains_checks_characters(table):
    assert "か" in table
    assert "ka" not in table


def test_duplicate_transliteration_rejected():
    with pytest.raises(ValueError, match="transliteration"):
        CharacterTable([("あ", "a"), ("ア", "a")])


def test_duplicate_character_rejected():
    with pytest.raises(ValueError, match="character"):
        CharacterTable([("あ", "a"), ("あ", "o")])


def test_entries_are_immutable(table):
    entry = table.entries[0]
    with pytest.raises(Exception):
        entry.character = "x"
