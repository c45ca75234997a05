import logging
import random
from typing import List, Optional

from .characters import CharacterTable
from .config import settings
from .errors import InvalidChoiceError, InvalidStateError
from .models import AnswerRecord, Question, SessionState
from .options import OptionGenerator

logger = logging.getLogger(__name__)


class QuizSession:
    """
    A fixed-length run of questions.

    The session is in progress until ``total_questions`` answers have been
    recorded, then finished. Only ``reset()`` leaves the finished state.
    """

    def __init__(
        self,
        table: CharacterTable,
        generator: OptionGenerator,
        rng: random.Random,
        total_questions: int = settings.QUESTIONS_PER_SESSION,
    ):
        self.table = table
        self.generator = generator
        self.rng = rng
        self.total_questions = total_questions
        self.current_question: Optional[Question] = None
        self._state = SessionState()
        logger.info(f"New session [{total_questions} questions]")

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def questions_asked(self) -> int:
        return self._state.questions_asked

    @property
    def finished(self) -> bool:
        return self._state.finished

    @property
    def answers(self) -> List[AnswerRecord]:
        return list(self._state.answers)

    def state(self) -> SessionState:
        return self._state.model_copy(deep=True)

    def next_question(self) -> Question:
        if self.finished:
            raise InvalidStateError("Session is finished")

        # Drawn with replacement, so a character may come up twice in a session.
        transliteration = self.rng.choice(self.table.transliterations())
        character = self.table.character_for(transliteration)
        self.current_question = Question(
            transliteration=transliteration,
            character=character,
            options=self.generator.generate(character),
        )
        return self.current_question

    def answer_question(self, choice_index: int) -> AnswerRecord:
        """Record the answer at 0-based ``choice_index`` for the pending question."""
        if self.finished:
            raise InvalidStateError("Session is finished")
        question = self.current_question
        if question is None:
            raise InvalidStateError("No question is waiting for an answer")
        if not (0 <= choice_index < len(question.options)):
            raise InvalidChoiceError(
                f"Choice {choice_index} out of range for {len(question.options)} options"
            )

        is_correct = question.is_correct(choice_index)
        if is_correct:
            self._state.score += 1
        self._state.questions_asked += 1

        record = AnswerRecord(
            transliteration=question.transliteration,
            user_answer=question.options[choice_index],
            correct_answer=question.character,
            is_correct=is_correct,
        )
        self._state.answers.append(record)
        self.current_question = None
        logger.debug(
            f"Answer {self.questions_asked}/{self.total_questions}: "
            f"{record.transliteration} -> {record.user_answer} "
            f"({'correct' if is_correct else 'wrong'})"
        )

        if self.questions_asked >= self.total_questions:
            self._state.finished = True
            logger.info(f"Session finished: {self.score}/{self.total_questions}")
        return record

    def mistakes(self) -> List[AnswerRecord]:
        return [record for record in self._state.answers if not record.is_correct]

    def reset(self):
        self._state = SessionState()
        self.current_question = None
        logger.info("Session reset")
