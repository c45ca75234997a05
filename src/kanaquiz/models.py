from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    character: str
    transliteration: str


class Question(BaseModel):
    transliteration: str
    character: str
    options: List[str]

    @property
    def correct_index(self) -> int:
        return self.options.index(self.character)

    def is_correct(self, index: int) -> bool:
        return self.options[index] == self.character


class AnswerRecord(BaseModel):
    transliteration: str
    user_answer: str
    correct_answer: str
    is_correct: bool


class SessionState(BaseModel):
    """Snapshot of a quiz session's progress."""

    score: int = Field(default=0, ge=0)
    questions_asked: int = Field(default=0, ge=0)
    finished: bool = False
    answers: List[AnswerRecord] = Field(default_factory=list)
