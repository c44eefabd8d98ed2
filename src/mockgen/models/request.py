# src/mockgen/models/request.py
"""Generation request model."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ValidationError, field_validator

Difficulty = Literal["easy", "medium", "hard", "mixed"]
SessionType = Literal["practice", "pyq", "mock"]

MIN_QUESTIONS = 1
MAX_QUESTIONS = 100
DEFAULT_NUM_QUESTIONS = 10
DEFAULT_MEDIUM = "English"


class GenerationRequest(BaseModel):
    """A request for N questions across a list of topics.

    Topics are stripped and blank entries dropped; duplicates are kept
    because callers may weight a topic by listing it twice. The question
    count is clamped into [1, 100] rather than rejected.

    Example:
        request = GenerationRequest(
            exam_type="SSC CGL",
            topics=["Algebra", "Geometry"],
            num_questions=20,
            difficulty="hard",
        )
    """

    exam_type: str
    topics: list[str]
    num_questions: int = DEFAULT_NUM_QUESTIONS
    difficulty: Difficulty = "mixed"
    session_type: SessionType = "practice"
    medium: str = DEFAULT_MEDIUM

    @field_validator("exam_type")
    @classmethod
    def _exam_type_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("exam_type must not be empty")
        return value

    @field_validator("topics")
    @classmethod
    def _topics_not_empty(cls, value: list[str]) -> list[str]:
        topics = [t.strip() for t in value if t and t.strip()]
        if not topics:
            raise ValueError("at least one topic is required")
        return topics

    @field_validator("num_questions")
    @classmethod
    def _clamp_num_questions(cls, value: int) -> int:
        return max(MIN_QUESTIONS, min(MAX_QUESTIONS, value))

    @field_validator("difficulty", "session_type", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("medium", mode="before")
    @classmethod
    def _default_medium(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_MEDIUM
        return value.strip() if isinstance(value, str) else value

    @classmethod
    def create(cls, **fields: Any) -> GenerationRequest:
        """Validate fields and build a request.

        Raises:
            InvalidRequestError: If any field is missing or invalid.
        """
        from mockgen.question_generator.exceptions import InvalidRequestError

        try:
            return cls(**fields)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidRequestError(f"Invalid generation request ({problems})") from e
