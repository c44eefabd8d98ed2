# src/mockgen/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockgen.providers import LLMClient
    from mockgen.question_generator import QuestionGenerator
    from mockgen.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for chat completions.

    Args:
        llm: LiteLLM model identifier.
             Examples: "perplexity/sonar-reasoning", "groq/llama-3.3-70b-versatile"
        api_key: Optional API key. None lets LiteLLM read the provider's
                 environment variable (PERPLEXITYAI_API_KEY, GROQ_API_KEY, ...).
        api_base: Optional endpoint override.

    Example:
        provider = LiteLLMProvider(llm="perplexity/sonar-reasoning")
        generator = provider.build_question_generator(Settings())
    """

    llm: str
    api_key: str | None = None
    api_base: str | None = None

    def resolve_settings(self, settings: Settings) -> Settings:
        """Fill unset settings from the preset detected for this model."""
        return settings.for_model(self.llm)

    def build_llm_client(self, settings: Settings | None = None) -> LLMClient:
        """Build a LiteLLMClient.

        Args:
            settings: Optional settings containing num_retries. If None,
                      LiteLLM-level retries are disabled.
        """
        from mockgen.providers.litellm import LiteLLMClient

        return LiteLLMClient(
            model=self.llm,
            api_key=self.api_key,
            api_base=self.api_base,
            num_retries=settings.num_retries if settings else 0,
        )

    def build_question_generator(self, settings: Settings) -> QuestionGenerator:
        """Build a ClientQuestionGenerator backed by LiteLLM."""
        from mockgen.question_generator import ClientQuestionGenerator

        settings = self.resolve_settings(settings)
        return ClientQuestionGenerator(
            llm_client=self.build_llm_client(settings),
            settings=settings,
        )
