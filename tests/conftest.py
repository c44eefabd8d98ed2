"""Shared pytest fixtures."""

import asyncio
import re
import tempfile
from collections.abc import Callable

import pytest

from mockgen.providers.base import LLMClient
from mockgen.settings import Settings

COUNT_PATTERN = re.compile(r"EXACTLY (\d+)")
TOPICS_PATTERN = re.compile(r"^Topics: (.+)$", re.MULTILINE)


def question_block(number: int, topic: str, stem: str | None = None, correct: str = "B") -> str:
    """One question in the layout the prompt asks for."""
    stem = stem or f"Which value belongs to {topic} item {number}?"
    return (
        f"Question {number}:\n"
        f"{stem}\n"
        f"A) {number}\n"
        f"B) {number + 1}\n"
        f"C) {number + 2}\n"
        f"D) {number + 3}\n"
        f"Topic: {topic}\n"
        f"Correct: {correct}\n"
        f"Explanation: The answer is {number + 1}.\n"
    )


def prompt_count(messages: list[dict]) -> int:
    match = COUNT_PATTERN.search(messages[0]["content"])
    return int(match.group(1)) if match else 0


def prompt_topics(messages: list[dict]) -> list[str]:
    match = TOPICS_PATTERN.search(messages[0]["content"])
    return [t.strip() for t in match.group(1).split(",")] if match else []


class FakeLLMClient(LLMClient):
    """Scripted LLMClient for pipeline tests.

    By default every call answers with exactly the requested number of
    fresh, unique questions. Pass `script` to control replies per call: it
    receives (call_index, messages) and returns text or raises.
    """

    def __init__(
        self,
        script: Callable[[int, list[dict]], str] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.script = script
        self.delay = delay
        self.calls: list[dict] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.cancelled = 0
        self._serial = 0

    def fresh_questions(self, count: int, topics: list[str]) -> str:
        blocks = []
        for i in range(count):
            self._serial += 1
            topic = topics[i % len(topics)] if topics else "General"
            blocks.append(question_block(self._serial, topic))
        return "\n".join(blocks)

    def complete(self, messages, temperature=None, max_tokens=None):
        raise NotImplementedError("use acomplete")

    async def acomplete(self, messages, temperature=None, max_tokens=None):
        index = len(self.calls)
        self.calls.append(
            {"messages": messages, "temperature": temperature, "max_tokens": max_tokens}
        )
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.script is not None:
                return self.script(index, messages)
            return self.fresh_questions(prompt_count(messages), prompt_topics(messages))
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        finally:
            self.in_flight -= 1


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def settings():
    """Settings without backoff delays."""
    return Settings(backoff_base=0.0, request_timeout=5.0, max_retries=2)


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def sample_request():
    from mockgen.models import GenerationRequest

    return GenerationRequest(
        exam_type="SSC CGL",
        topics=["Algebra", "Geometry"],
        num_questions=20,
        difficulty="medium",
    )


@pytest.fixture
def mock_provider(fake_llm):
    """Provider that builds a ClientQuestionGenerator around the fake client.

    Satisfies the ProviderConfig protocol.
    """
    from dataclasses import dataclass
    from typing import Any

    from mockgen.question_generator import ClientQuestionGenerator

    @dataclass(frozen=True)
    class MockProvider:
        _llm_client: Any

        def build_llm_client(self, settings: Any = None) -> Any:
            return self._llm_client

        def build_question_generator(self, settings: Any) -> Any:
            return ClientQuestionGenerator(self._llm_client, settings)

    return MockProvider(_llm_client=fake_llm)


@pytest.fixture
def make_block():
    """Factory for one well-formed question block."""
    return question_block


@pytest.fixture
def make_llm():
    """Factory for FakeLLMClient with a custom script or delay."""
    return FakeLLMClient
