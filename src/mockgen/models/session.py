# src/mockgen/models/session.py
"""Test session, answer and score models."""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field

DEFAULT_DURATION_MINUTES = 60


class TestSession(BaseModel):
    """A generated mock test.

    num_questions is the number of stored questions, which can be lower than
    requested_questions when generation fell short.
    """

    __test__ = False  # not a pytest class

    id: str = Field(default_factory=lambda: str(uuid4()))
    exam_type: str
    difficulty: str
    session_type: str
    medium: str = "English"
    num_questions: int = 0
    requested_questions: int = 0
    duration_minutes: int = DEFAULT_DURATION_MINUTES
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class AnswerRecord(BaseModel):
    """A user's selection for one question."""

    session_id: str
    question_id: str
    selected_option: str | None
    is_correct: bool


class QuestionScore(BaseModel):
    """Per-question outcome in a scored session."""

    question_id: str
    index_in_session: int
    selected_option: str | None
    correct_option: str
    is_correct: bool


class SessionScore(BaseModel):
    """Aggregate result for a session."""

    session_id: str
    total: int
    attempted: int
    correct: int
    score_percent: int
    breakdown: list[QuestionScore] = Field(default_factory=list)
