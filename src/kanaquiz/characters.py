import logging
from typing import Dict, FrozenSet, Iterable, Tuple

from .errors import CharacterNotFoundError
from .models import Entry

logger = logging.getLogger(__name__)

# (character, romaji) for the 46 base hiragana.
HIRAGANA: Tuple[Tuple[str, str], ...] = (
    ("あ", "a"), ("い", "i"), ("う", "u"), ("え", "e"), ("お", "o"),
    ("か", "ka"), ("き", "ki"), ("く", "ku"), ("け", "ke"), ("こ", "ko"),
    ("さ", "sa"), ("し", "shi"), ("す", "su"), ("せ", "se"), ("そ", "so"),
    ("た", "ta"), ("ち", "chi"), ("つ", "tsu"), ("て", "te"), ("と", "to"),
    ("な", "na"), ("に", "ni"), ("ぬ", "nu"), ("ね", "ne"), ("の", "no"),
    ("は", "ha"), ("ひ", "hi"), ("ふ", "fu"), ("へ", "he"), ("ほ", "ho"),
    ("ま", "ma"), ("み", "mi"), ("む", "mu"), ("め", "me"), ("も", "mo"),
    ("や", "ya"), ("ゆ", "yu"), ("よ", "yo"),
    ("ら", "ra"), ("り", "ri"), ("る", "ru"), ("れ", "re"), ("ろ", "ro"),
    ("わ", "wa"), ("を", "wo"),
    ("ん", "n"),
)


class CharacterTable:
    """Read-only two-way mapping between characters and their transliterations."""

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        self._entries: Tuple[Entry, ...] = tuple(
            Entry(character=character, transliteration=transliteration)
            for character, transliteration in pairs
        )
        self._by_transliteration: Dict[str, str] = {}
        self._by_character: Dict[str, str] = {}

        for entry in self._entries:
            if entry.character in self._by_character:
                raise ValueError(f"Duplicate character: {entry.character!r}")
            if entry.transliteration in self._by_transliteration:
                raise ValueError(
                    f"Duplicate transliteration: {entry.transliteration!r}"
                )
            self._by_character[entry.character] = entry.transliteration
            self._by_transliteration[entry.transliteration] = entry.character

        logger.debug(f"Loaded {len(self._entries)} characters")

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, character: object) -> bool:
        return character in self._by_character

    def transliterations(self) -> Tuple[str, ...]:
        return tuple(entry.transliteration for entry in self._entries)

    def characters(self) -> Tuple[str, ...]:
        return tuple(entry.character for entry in self._entries)

    def all_transliterations(self) -> FrozenSet[str]:
        return frozenset(self._by_transliteration)

    def all_characters(self) -> FrozenSet[str]:
        return frozenset(self._by_character)

    def character_for(self, transliteration: str) -> str:
        try:
            return self._by_transliteration[transliteration]
        except KeyError:
            raise CharacterNotFoundError(transliteration) from None

    def transliteration_for(self, character: str) -> str:
        try:
            return self._by_character[character]
        except KeyError:
            raise CharacterNotFoundError(character) from None
