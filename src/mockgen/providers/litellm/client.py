# src/mockgen/providers/litellm/client.py
"""LiteLLM client implementation for chat-completion APIs."""

from typing import Any

import litellm

from mockgen.providers.base import LLMClient
from mockgen.providers.litellm.models import DEFAULT_MODEL


class LiteLLMClient(LLMClient):
    """LiteLLM-based LLM client for text generation.

    Supports any model available through LiteLLM (Perplexity, Groq, OpenAI,
    Gemini, Anthropic, etc.).

    Example:
        from mockgen.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.SONAR_REASONING, api_key="pplx-...")
        text = client.complete([{"role": "user", "content": "Hello"}], max_tokens=600)
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        api_base: str | None = None,
        timeout: float | None = None,
        num_retries: int = 0,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
                   Examples: "perplexity/sonar-reasoning", "groq/llama-3.3-70b-versatile"
            api_key: API key sent as bearer token. None lets LiteLLM read the
                     provider's usual environment variable.
            api_base: Optional endpoint override (proxies, self-hosted gateways).
            timeout: Transport timeout in seconds. The question generator also
                     enforces its own per-call timeout.
            num_retries: Retries on rate limit errors, handled by LiteLLM.
                         Default 0: the generator owns the retry budget.
        """
        self.model = model
        self.api_key = api_key
        self.api_base = api_base
        self.timeout = timeout
        self.num_retries = num_retries

    def _completion_kwargs(
        self,
        messages: list[dict],
        temperature: float | None,
        max_tokens: int | None,
    ) -> dict[str, Any]:
        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            completion_kwargs["temperature"] = temperature
        if max_tokens is not None:
            completion_kwargs["max_tokens"] = max_tokens
        if self.api_key:
            completion_kwargs["api_key"] = self.api_key
        if self.api_base:
            completion_kwargs["api_base"] = self.api_base
        if self.timeout is not None:
            completion_kwargs["timeout"] = self.timeout
        return completion_kwargs

    def _extract_content(self, response: Any) -> str:
        if not response.choices:
            raise ValueError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError(f"LLM returned None content for model {self.model}")
        return str(content)

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate a completion using LiteLLM."""
        response = litellm.completion(**self._completion_kwargs(messages, temperature, max_tokens))
        return self._extract_content(response)

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate a completion using LiteLLM (async)."""
        response = await litellm.acompletion(
            **self._completion_kwargs(messages, temperature, max_tokens)
        )
        return self._extract_content(response)
