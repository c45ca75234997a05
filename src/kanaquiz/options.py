import random
from typing import List

from .characters import CharacterTable
from .config import settings
from .errors import CharacterNotFoundError, InsufficientDataError


class OptionGenerator:
    """Builds shuffled multiple-choice option sets from a character table."""

    def __init__(
        self,
        table: CharacterTable,
        rng: random.Random,
        option_count: int = settings.OPTION_COUNT,
    ):
        self.table = table
        self.rng = rng
        self.option_count = option_count

    def generate(self, correct_character: str) -> List[str]:
        """Return the correct character plus distinct distractors, shuffled."""
        if len(self.table) < self.option_count:
            raise InsufficientDataError(
                f"Need {self.option_count} characters, table has {len(self.table)}"
            )
        if correct_character not in self.table:
            raise CharacterNotFoundError(correct_character)

        candidates = [c for c in self.table.characters() if c != correct_character]
        options = self.rng.sample(candidates, self.option_count - 1)
        options.append(correct_character)
        self.rng.shuffle(options)
        return options
