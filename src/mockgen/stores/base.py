# src/mockgen/stores/base.py
"""Abstract base class for test session storage."""

from abc import ABC, abstractmethod

from mockgen.models import AnswerRecord, QuestionCandidate, StoredQuestion, TestSession


class SessionStore(ABC):
    """Abstract base class for session, question and answer storage."""

    @abstractmethod
    def create_session(self, session: TestSession) -> TestSession:
        """Store a new session."""
        ...

    @abstractmethod
    def get_session(self, session_id: str) -> TestSession | None:
        """Retrieve a session by ID. Returns None if not found."""
        ...

    @abstractmethod
    def list_sessions(self, limit: int | None = None) -> list[TestSession]:
        """List sessions, newest first."""
        ...

    @abstractmethod
    def count_sessions(self) -> int:
        """Count the total number of sessions in the store."""
        ...

    @abstractmethod
    def delete_session(self, session_id: str) -> None:
        """Delete a session with its questions and answers."""
        ...

    @abstractmethod
    def add_questions(
        self, session_id: str, questions: list[QuestionCandidate]
    ) -> list[StoredQuestion]:
        """Append questions to a session with sequential 1-based indices."""
        ...

    @abstractmethod
    def get_questions(self, session_id: str) -> list[StoredQuestion]:
        """Get all questions of a session, ordered by index."""
        ...

    @abstractmethod
    def get_question_by_index(self, session_id: str, index: int) -> StoredQuestion | None:
        """Get one question by its 1-based index. Returns None if not found."""
        ...

    @abstractmethod
    def save_answers(self, answers: list[AnswerRecord]) -> None:
        """Store answers, replacing earlier answers to the same question."""
        ...

    @abstractmethod
    def get_answers(self, session_id: str) -> list[AnswerRecord]:
        """Get all stored answers of a session."""
        ...
