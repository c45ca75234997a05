import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .config import settings
from .models import Question
from .session import QuizSession

logger = logging.getLogger(__name__)

CHOICE_PROMPT = "Enter the number of your choice: "
RESTART_PROMPT = "Do you want to restart the quiz? (yes/no): "
FAREWELL = "Thank you for playing!"


class ChoiceError(str, Enum):
    PARSE = "parse"
    RANGE = "range"


@dataclass(frozen=True)
class ParsedChoice:
    value: Optional[int] = None
    error: Optional[ChoiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_choice(raw: str, option_count: int) -> ParsedChoice:
    """
    raw: one line of user input, e.g. " 2 "
    option_count: number of options shown, valid choices are 1..option_count
    """
    try:
        value = int(raw.strip())
    except ValueError:
        return ParsedChoice(error=ChoiceError.PARSE)

    if not (1 <= value <= option_count):
        return ParsedChoice(value=value, error=ChoiceError.RANGE)
    return ParsedChoice(value=value)


class InteractionLoop:
    """Plays quiz sessions on a line-based console until the user stops."""

    def __init__(
        self,
        session: QuizSession,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        self.session = session
        self.input = input_func
        self.output = output_func

    def run(self):
        try:
            while True:
                self.play_session()
                if not self.ask_restart():
                    break
                self.session.reset()
        except EOFError:
            logger.info("Input closed, exiting")
        self.output(FAREWELL)

    def play_session(self):
        while not self.session.finished:
            self.ask_question()

        total = self.session.total_questions
        self.output(
            f"Quiz Completed! Your final score is {self.session.score}/{total}"
        )
        self.show_review()

    def ask_question(self):
        question = self.session.next_question()
        self.output("")
        self.output(
            "What is the correct character for the romanized form "
            f"'{question.transliteration}'?"
        )
        for line in self.option_lines(question):
            self.output(line)

        choice = self.read_choice(len(question.options))
        record = self.session.answer_question(choice - 1)

        if record.is_correct:
            self.output("Correct!")
        else:
            self.output(f"Wrong! The correct answer was '{record.correct_answer}'")
            marked = self.option_lines(question, mark_correct=True)
            self.output(marked[question.correct_index])
        self.output(f"Score: {self.session.score}/{self.session.total_questions}")

    @staticmethod
    def option_lines(question: Question, mark_correct: bool = False) -> List[str]:
        lines = []
        for number, character in enumerate(question.options, start=1):
            line = f"{number}. {character}"
            if mark_correct and character == question.character:
                line += " *"
            lines.append(line)
        return lines

    def read_choice(self, option_count: int) -> int:
        while True:
            raw = self.input(CHOICE_PROMPT)
            parsed = parse_choice(raw, option_count)
            if parsed.ok:
                return parsed.value

            logger.debug(f"Rejected input {raw!r}: {parsed.error.value}")
            if parsed.error is ChoiceError.PARSE:
                self.output("Invalid input. Please enter a number.")
            else:
                self.output(
                    f"Invalid choice. Please select a number between 1 and {option_count}."
                )

    def show_review(self):
        mistakes = self.session.mistakes()
        if not mistakes:
            return
        self.output("Characters to review:")
        for record in mistakes:
            self.output(f"  {record.correct_answer} ({record.transliteration})")

    def ask_restart(self) -> bool:
        answer = self.input(RESTART_PROMPT)
        return answer.strip().lower() == settings.RESTART_ANSWER
