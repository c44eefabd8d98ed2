# src/mockgen/question_generator/client.py
"""Client-based question generator: plan, fan out, dedupe, fill."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from mockgen.models import Batch, GenerationRequest, GenerationResult, QuestionCandidate
from mockgen.providers.base import LLMClient
from mockgen.question_generator.base import ProgressCallback, QuestionGenerator
from mockgen.question_generator.dedup import DuplicateFilter
from mockgen.question_generator.fetcher import BatchFetcher
from mockgen.question_generator.parser import strip_question_number
from mockgen.question_generator.planner import least_used_topic, plan_batches
from mockgen.question_generator.pool import run_pool
from mockgen.settings import Settings

logger = logging.getLogger(__name__)


def renumber(questions: list[QuestionCandidate]) -> list[QuestionCandidate]:
    """Prefix each question with "Question {i}: ", replacing any existing number."""
    return [
        q.model_copy(
            update={"question_text": f"Question {i}: {strip_question_number(q.question_text)}"}
        )
        for i, q in enumerate(questions, start=1)
    ]


class ClientQuestionGenerator(QuestionGenerator):
    """Question generator that uses an LLMClient with batched requests.

    Pipeline:
        1. Plan per-topic batches, merging undersized ones.
        2. Fetch all batches through a fixed-size worker pool.
        3. Flatten in batch order and drop duplicate fingerprints.
        4. Fill loop: request the least-represented topic until the target
           is reached or settings.max_fill_iterations is used up.
        5. Truncate to the target and renumber.

    The result can be shorter than requested when the upstream model keeps
    failing; GenerationResult.shortfall reports by how much.

    Example:
        from mockgen.providers.litellm import LiteLLMClient
        from mockgen.question_generator import ClientQuestionGenerator

        client = LiteLLMClient(model="perplexity/sonar-reasoning")
        generator = ClientQuestionGenerator(llm_client=client)
        request = GenerationRequest(exam_type="SSC CGL", topics=["Algebra"], num_questions=10)
        result = await generator.agenerate(request)
    """

    def __init__(
        self,
        llm_client: LLMClient,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the question generator.

        Args:
            llm_client: Any LLMClient implementation
            settings: Pipeline settings. Default: Settings()
        """
        self._client = llm_client
        self.settings = settings or Settings()
        self._fetcher = BatchFetcher(llm_client, self.settings)
        self._duplicates = DuplicateFilter(
            fingerprint_length=self.settings.fingerprint_length,
            option_count=self.settings.fingerprint_options,
        )

    async def agenerate(
        self,
        request: GenerationRequest,
        on_progress: ProgressCallback | None = None,
    ) -> GenerationResult:
        """Generate up to request.num_questions unique questions.

        Cancelling the awaiting task cancels every in-flight upstream call.
        """

        def notify(event: str, current: int, total: int, message: str) -> None:
            if on_progress:
                on_progress(event, current, total, message)

        settings = self.settings
        target = request.num_questions
        batches = plan_batches(
            request.topics,
            target,
            min_batch_size=settings.min_batch_size,
            max_batch_size=settings.max_batch_size,
        )
        logger.info(
            "Planned %d batches for %d questions across %d topics",
            len(batches),
            target,
            len(request.topics),
        )
        notify("planning", len(batches), len(batches), f"{len(batches)} batches planned")

        completed = 0

        def make_task(index: int, batch: Batch) -> Callable[[], Awaitable[list[QuestionCandidate]]]:
            async def run() -> list[QuestionCandidate]:
                nonlocal completed
                questions = await self._fetcher.fetch_with_retry(batch, request, label=str(index))
                completed += 1
                notify(
                    "generating",
                    completed,
                    len(batches),
                    f"Batch {index}: {len(questions)}/{batch.count} questions",
                )
                return questions

            return run

        results = await run_pool(
            settings.concurrency_limit,
            [make_task(i, batch) for i, batch in enumerate(batches, start=1)],
        )

        seen: set[str] = set()
        questions = self._duplicates.filter([q for batch in results for q in batch], seen)

        iterations = 0
        while len(questions) < target and iterations < settings.max_fill_iterations:
            iterations += 1
            missing = target - len(questions)
            topic = least_used_topic(request.topics, (q.topic for q in questions))
            count = min(max(missing, settings.min_batch_size), settings.max_batch_size)
            logger.info(
                "Fill %d/%d: %d questions missing, requesting %d for %s",
                iterations,
                settings.max_fill_iterations,
                missing,
                count,
                topic,
            )
            notify(
                "filling",
                iterations,
                settings.max_fill_iterations,
                f"{missing} missing, requesting {count} for {topic}",
            )
            fresh = await self._fetcher.fetch_with_retry(
                Batch(topics=[topic], count=count),
                request,
                label=f"fill-{iterations}",
                temperature=settings.temperature_for(request.medium, fill=True),
            )
            added = self._duplicates.filter(fresh, seen)
            if not added:
                logger.warning("Fill %d produced no new questions", iterations)
            questions.extend(added)

        final = renumber(questions[:target])
        if len(final) < target:
            logger.warning(
                "Generated %d of %d questions after %d fill iterations",
                len(final),
                target,
                iterations,
            )
        else:
            logger.info("Generated %d questions", len(final))
        notify("complete", len(final), target, f"{len(final)}/{target} questions")

        return GenerationResult(
            questions=final,
            requested=target,
            batches_planned=len(batches),
            fill_iterations=iterations,
        )
