# src/mockgen/providers/base.py
"""Abstract base class for LLM providers."""

from abc import ABC, abstractmethod


class LLMClient(ABC):
    """Abstract base class for chat-completion providers.

    Implementations send a list of chat messages to a model and return the
    text of the first choice. The interface is intentionally minimal so any
    chat-completion endpoint can back the question generator.

    Example:
        class MyLLMClient(LLMClient):
            def complete(self, messages, temperature=None, max_tokens=None):
                return my_api.chat(messages, temp=temperature, limit=max_tokens)
    """

    @abstractmethod
    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate a completion for the given messages.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
                      Example: [{"role": "system", "content": "..."},
                                {"role": "user", "content": "..."}]
            temperature: Optional sampling temperature. If None, use provider default.
            max_tokens: Optional cap on generated tokens. If None, use provider default.

        Returns:
            The generated text response.

        Raises:
            ValueError: If the provider returned no usable content.
        """
        ...

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate a completion for the given messages (async).

        Default implementation calls sync complete(). Override in subclasses
        for true async behavior.
        """
        return self.complete(messages, temperature, max_tokens)
