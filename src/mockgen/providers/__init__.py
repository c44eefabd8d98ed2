"""Provider implementations for mockgen.

- LLMClient: Abstract base class for chat-completion providers
- LiteLLMClient: LiteLLM implementation

Usage:
    from mockgen.providers import LLMClient
    from mockgen.providers.litellm import LiteLLMClient, ChatModels
"""

from mockgen.providers.base import LLMClient
from mockgen.providers.litellm import ChatModels, LiteLLMClient

__all__ = [
    # ABCs
    "LLMClient",
    # Model constants
    "ChatModels",
    # LiteLLM client
    "LiteLLMClient",
]
