# src/mockgen/models/question.py
"""Question data models."""

from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

OptionLetter = Literal["A", "B", "C", "D"]
OPTION_LETTERS: tuple[OptionLetter, ...] = ("A", "B", "C", "D")


class QuestionCandidate(BaseModel):
    """A parsed multiple-choice question, not yet persisted."""

    exam_type: str
    topic: str
    difficulty: str
    question_text: str = Field(min_length=1)
    option_a: str = Field(min_length=1)
    option_b: str = Field(min_length=1)
    option_c: str = ""
    option_d: str = ""
    correct_option: OptionLetter
    explanation: str = ""

    @field_validator("correct_option", mode="before")
    @classmethod
    def _uppercase_letter(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def options(self) -> dict[str, str]:
        """Options keyed by letter, skipping empty ones."""
        pairs = zip(
            OPTION_LETTERS,
            (self.option_a, self.option_b, self.option_c, self.option_d),
            strict=True,
        )
        return {letter: text for letter, text in pairs if text}


class StoredQuestion(QuestionCandidate):
    """A question row belonging to a test session.

    index_in_session is 1-based and matches the "Question N:" prefix.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    session_id: str
    index_in_session: int = Field(ge=1)
