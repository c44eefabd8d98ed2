# src/mockgen/mockgen.py
"""Central configuration class for mockgen."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mockgen.configuration import ProviderConfig, StorageConfig
    from mockgen.models import GenerationResult, SessionScore, StoredQuestion
    from mockgen.question_generator import ProgressCallback, QuestionGenerator
    from mockgen.stores import SessionStore

from mockgen.models import DEFAULT_DURATION_MINUTES, GenerationRequest, TestSession
from mockgen.scoring import score_answers
from mockgen.settings import Settings


class MockGen:
    """Central configuration for question generation and session storage.

    MockGen bundles the question generator and the session store so you can
    configure once and then generate, persist and score mock tests.

    1. With a storage bundle (developer-friendly):

        from mockgen import MockGen, LiteLLMProvider, LocalStorage

        mg = MockGen(
            provider=LiteLLMProvider(llm="perplexity/sonar-reasoning"),
            storage=LocalStorage("./mockgen_data"),
        )
        session, result = mg.create_session(
            exam_type="SSC CGL", topics=["Algebra", "Geometry"], num_questions=20
        )

    2. With an explicit store:

        from mockgen.stores import SQLiteSessionStore

        mg = MockGen(
            provider=LiteLLMProvider(llm="groq/llama-3.3-70b-versatile"),
            store=SQLiteSessionStore("./data/sessions.db"),
        )

    3. Generation only (no persistence):

        mg = MockGen(provider=LiteLLMProvider(llm="perplexity/sonar-reasoning"))
        result = mg.generate(exam_type="UPSC", topics=["Polity"], num_questions=5)
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig,
        storage: StorageConfig | None = None,
        store: SessionStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Create a MockGen instance.

        Args:
            provider: Provider configuration (builds the question generator).
                      Example: LiteLLMProvider(llm="perplexity/sonar-reasoning")
            storage: Storage bundle. Mutually exclusive with store.
                     Example: LocalStorage("./mockgen_data")
            store: Explicit session store.
            settings: Pipeline settings. Default: Settings()

        Raises:
            ValueError: If both storage and store are provided.
        """
        if storage is not None and store is not None:
            raise ValueError("Cannot mix 'storage' bundle with an explicit store")

        self._settings = settings if settings is not None else Settings()
        self._store: SessionStore | None = storage.build_store() if storage is not None else store
        self._question_generator = provider.build_question_generator(self._settings)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def question_generator(self) -> QuestionGenerator:
        return self._question_generator

    @property
    def store(self) -> SessionStore:
        """The session store.

        Raises:
            ValueError: If this instance was created without storage.
        """
        if self._store is None:
            raise ValueError("No session store configured; pass 'storage' or 'store'")
        return self._store

    @staticmethod
    def _to_request(request: GenerationRequest | None, fields: dict[str, Any]) -> GenerationRequest:
        if request is not None:
            if fields:
                raise ValueError("Pass either a GenerationRequest or request fields, not both")
            return request
        return GenerationRequest.create(**fields)

    async def agenerate(
        self,
        request: GenerationRequest | None = None,
        *,
        on_progress: ProgressCallback | None = None,
        **fields: Any,
    ) -> GenerationResult:
        """Generate questions without persisting them.

        Args:
            request: A prepared request, or None to build one from fields.
            on_progress: Optional callback for progress updates.
            **fields: GenerationRequest fields (exam_type, topics, ...).

        Raises:
            InvalidRequestError: If the request fields are invalid.
        """
        if "medium" not in fields and request is None:
            fields["medium"] = self._settings.default_medium
        generation_request = self._to_request(request, fields)
        return await self._question_generator.agenerate(generation_request, on_progress)

    def generate(
        self,
        request: GenerationRequest | None = None,
        *,
        on_progress: ProgressCallback | None = None,
        **fields: Any,
    ) -> GenerationResult:
        """Generate questions without persisting them (sync)."""
        return asyncio.run(self.agenerate(request, on_progress=on_progress, **fields))

    async def acreate_session(
        self,
        request: GenerationRequest | None = None,
        *,
        duration_minutes: int = DEFAULT_DURATION_MINUTES,
        on_progress: ProgressCallback | None = None,
        **fields: Any,
    ) -> tuple[TestSession | None, GenerationResult]:
        """Generate questions and store them as a new test session.

        The session's num_questions is the stored count, which can be lower
        than requested when generation fell short. Nothing is stored when no
        question was generated.

        Returns:
            Tuple of (stored session or None, generation result)
        """
        if "medium" not in fields and request is None:
            fields["medium"] = self._settings.default_medium
        generation_request = self._to_request(request, fields)
        result = await self._question_generator.agenerate(generation_request, on_progress)
        if not result.questions:
            return None, result

        session = self.store.create_session(
            TestSession(
                exam_type=generation_request.exam_type,
                difficulty=generation_request.difficulty,
                session_type=generation_request.session_type,
                medium=generation_request.medium,
                requested_questions=result.requested,
                duration_minutes=duration_minutes,
            )
        )
        stored = self.store.add_questions(session.id, result.questions)
        session = session.model_copy(update={"num_questions": len(stored)})
        return session, result

    def create_session(
        self,
        request: GenerationRequest | None = None,
        *,
        duration_minutes: int = DEFAULT_DURATION_MINUTES,
        on_progress: ProgressCallback | None = None,
        **fields: Any,
    ) -> tuple[TestSession | None, GenerationResult]:
        """Generate questions and store them as a new test session (sync)."""
        return asyncio.run(
            self.acreate_session(
                request, duration_minutes=duration_minutes, on_progress=on_progress, **fields
            )
        )

    def get_questions(self, session_id: str) -> list[StoredQuestion]:
        """Questions of a stored session, ordered by index."""
        return self.store.get_questions(session_id)

    def submit(self, session_id: str, answers: dict[str, str | None]) -> SessionScore:
        """Score and store answers for a session.

        Args:
            session_id: The session being answered.
            answers: Mapping of question ID to selected letter (A-D).

        Raises:
            KeyError: If the session does not exist.
        """
        if self.store.get_session(session_id) is None:
            raise KeyError(f"Session not found: {session_id}")
        questions = self.store.get_questions(session_id)
        score, records = score_answers(session_id, questions, answers)
        self.store.save_answers(records)
        return score
