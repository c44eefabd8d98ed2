"""Data models for mockgen."""

from mockgen.models.batch import Batch
from mockgen.models.question import OPTION_LETTERS, OptionLetter, QuestionCandidate, StoredQuestion
from mockgen.models.request import (
    DEFAULT_NUM_QUESTIONS,
    MAX_QUESTIONS,
    MIN_QUESTIONS,
    Difficulty,
    GenerationRequest,
    SessionType,
)
from mockgen.models.results import GenerationResult
from mockgen.models.session import (
    DEFAULT_DURATION_MINUTES,
    AnswerRecord,
    QuestionScore,
    SessionScore,
    TestSession,
)

__all__ = [
    "Batch",
    "GenerationRequest",
    "Difficulty",
    "SessionType",
    "MIN_QUESTIONS",
    "MAX_QUESTIONS",
    "DEFAULT_NUM_QUESTIONS",
    "QuestionCandidate",
    "StoredQuestion",
    "OptionLetter",
    "OPTION_LETTERS",
    "GenerationResult",
    "TestSession",
    "AnswerRecord",
    "QuestionScore",
    "SessionScore",
    "DEFAULT_DURATION_MINUTES",
]
