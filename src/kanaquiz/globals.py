from .characters import HIRAGANA, CharacterTable

character_table = CharacterTable(HIRAGANA)
