# src/mockgen/configuration/base.py
"""Protocol definitions for configuration objects.

Provider and storage configurations are structural: any frozen dataclass
with the right methods satisfies the interface without inheritance.
Stores, by contrast, use ABCs (see mockgen.stores.base).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mockgen.providers import LLMClient
    from mockgen.question_generator import QuestionGenerator
    from mockgen.settings import Settings
    from mockgen.stores import SessionStore


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Example implementation:
        @dataclass(frozen=True)
        class MyProvider:
            model: str

            def build_llm_client(self, settings: Settings | None = None) -> LLMClient: ...
            def build_question_generator(self, settings: Settings) -> QuestionGenerator: ...
    """

    def build_llm_client(self, settings: Settings | None = None) -> LLMClient:
        """Build an LLM client for chat completions."""
        ...

    def build_question_generator(self, settings: Settings) -> QuestionGenerator:
        """Build a question generator.

        Args:
            settings: Pipeline settings (batching, retries, temperatures).
        """
        ...


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations.

    Example implementation:
        @dataclass(frozen=True)
        class LocalStorage:
            data_dir: str

            def build_store(self) -> SessionStore: ...
    """

    def build_store(self) -> SessionStore:
        """Build the session store."""
        ...
