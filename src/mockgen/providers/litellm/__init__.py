"""LiteLLM provider client for mockgen.

Usage:
    from mockgen.providers.litellm import LiteLLMClient, ChatModels
    from mockgen.question_generator import ClientQuestionGenerator

    client = LiteLLMClient(model=ChatModels.SONAR_REASONING)
    generator = ClientQuestionGenerator(llm_client=client)
"""

from mockgen.providers.litellm.client import LiteLLMClient
from mockgen.providers.litellm.models import DEFAULT_MODEL, ChatModels

__all__ = [
    # Model constants
    "ChatModels",
    "DEFAULT_MODEL",
    # Clients
    "LiteLLMClient",
]
