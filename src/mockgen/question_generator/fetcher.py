# src/mockgen/question_generator/fetcher.py
"""Single-batch upstream calls with retry, backoff and top-up."""

from __future__ import annotations

import asyncio
import logging

from mockgen.models import Batch, GenerationRequest, QuestionCandidate
from mockgen.providers.base import LLMClient
from mockgen.question_generator.exceptions import BatchFetchError
from mockgen.question_generator.parser import ParseContext, parse_questions
from mockgen.question_generator.prompts import build_prompt
from mockgen.settings import Settings

logger = logging.getLogger(__name__)


class BatchFetcher:
    """Fetches one batch of questions from an LLMClient.

    Each upstream call is bounded by settings.request_timeout. A failed
    attempt (timeout, client error, zero parseable questions) is retried
    up to settings.max_retries times with exponential backoff; when every
    attempt fails the batch yields an empty list instead of raising.

    Example:
        fetcher = BatchFetcher(llm_client, Settings())
        questions = await fetcher.fetch_with_retry(Batch(topics=["Algebra"], count=5), request)
    """

    def __init__(self, llm_client: LLMClient, settings: Settings | None = None) -> None:
        self._client = llm_client
        self.settings = settings or Settings()

    async def fetch(
        self,
        batch: Batch,
        request: GenerationRequest,
        label: str = "1",
        temperature: float | None = None,
        attempt: int = 1,
    ) -> list[QuestionCandidate]:
        """Make one upstream call and parse it.

        Raises:
            BatchFetchError: On timeout, client error or zero parsed questions.
        """
        settings = self.settings
        prompt = build_prompt(batch, request, label)
        if temperature is None:
            temperature = settings.temperature_for(request.medium)

        try:
            raw = await asyncio.wait_for(
                self._client.acomplete(
                    messages=prompt.messages(),
                    temperature=temperature,
                    max_tokens=settings.max_tokens_for(batch.count),
                ),
                timeout=settings.request_timeout,
            )
        except TimeoutError as e:
            raise BatchFetchError(
                f"Batch {label} timed out after {settings.request_timeout}s", label, attempt
            ) from e
        except Exception as e:
            raise BatchFetchError(f"Batch {label} upstream call failed: {e}", label, attempt) from e

        logger.debug("Batch %s attempt %d: received %d chars", label, attempt, len(raw))
        questions = parse_questions(
            raw,
            ParseContext(
                exam_type=request.exam_type,
                topics=batch.topics,
                difficulty=request.difficulty,
            ),
        )
        if not questions:
            raise BatchFetchError(f"Batch {label} returned no parseable questions", label, attempt)
        return questions

    async def fetch_with_retry(
        self,
        batch: Batch,
        request: GenerationRequest,
        label: str = "1",
        temperature: float | None = None,
        recursive: bool = False,
    ) -> list[QuestionCandidate]:
        """Fetch a batch, retrying failures and topping up short results.

        - Exactly batch.count parsed: returned as is (extras are trimmed).
        - batch.count <= min_batch_size and something parsed: partial accepted.
        - Short result on a non-recursive call: one recursive top-up for
          max(missing, min_batch_size) questions, concatenated and trimmed
          to batch.count.
        - Failed attempt: retried after backoff_base * 2 ** (attempt - 1) seconds.

        Returns:
            Up to batch.count questions; empty if every attempt failed.
        """
        settings = self.settings
        for attempt in range(1, settings.max_retries + 1):
            try:
                questions = await self.fetch(batch, request, label, temperature, attempt)
            except BatchFetchError as e:
                logger.warning(
                    "Batch %s attempt %d/%d failed: %s", label, attempt, settings.max_retries, e
                )
                if attempt < settings.max_retries:
                    await asyncio.sleep(settings.backoff_base * 2 ** (attempt - 1))
                continue

            if len(questions) >= batch.count:
                return questions[: batch.count]
            if batch.count <= settings.min_batch_size:
                return questions
            if recursive:
                return questions

            missing = batch.count - len(questions)
            top_up = Batch(topics=batch.topics, count=max(missing, settings.min_batch_size))
            logger.info(
                "Batch %s returned %d/%d questions, requesting %d more",
                label,
                len(questions),
                batch.count,
                top_up.count,
            )
            filler = await self.fetch_with_retry(
                top_up, request, f"{label}-topup", temperature, recursive=True
            )
            return (questions + filler)[: batch.count]

        logger.warning("Batch %s gave up after %d attempts", label, settings.max_retries)
        return []
