class QuizError(Exception):
    """Base class for quiz errors."""


class CharacterNotFoundError(QuizError, KeyError):
    """A character or transliteration is not in the table."""


class InsufficientDataError(QuizError):
    """The table is too small to build an option set."""


class InvalidStateError(QuizError):
    """An operation was called in a session state that does not allow it."""


class InvalidChoiceError(QuizError, ValueError):
    """An option index outside the current question's options."""
