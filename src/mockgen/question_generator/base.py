# src/mockgen/question_generator/base.py
"""QuestionGenerator abstract base class."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable

from mockgen.models import GenerationRequest, GenerationResult

ProgressCallback = Callable[[str, int, int, str], None]
"""Callback for generation progress updates.

Args:
    event: "planning", "generating", "filling" or "complete"
    current: Items done so far
    total: Items expected for this event
    message: Human-readable detail
"""


class QuestionGenerator(ABC):
    """Abstract base class for mock test question generation."""

    @abstractmethod
    async def agenerate(
        self,
        request: GenerationRequest,
        on_progress: ProgressCallback | None = None,
    ) -> GenerationResult:
        """Generate questions for a request (async)."""
        ...

    def generate(
        self,
        request: GenerationRequest,
        on_progress: ProgressCallback | None = None,
    ) -> GenerationResult:
        """Generate questions for a request.

        Runs agenerate() in a fresh event loop; do not call from inside a
        running loop.
        """
        return asyncio.run(self.agenerate(request, on_progress))
