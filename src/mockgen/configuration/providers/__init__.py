"""Provider configurations for mockgen."""

from mockgen.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
