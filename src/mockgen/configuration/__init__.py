"""Configuration objects for mockgen.

Instead of factory methods, you pass configuration objects that know how
to build their components.

Provider configurations (build LLM components):
- LiteLLMProvider: Uses LiteLLM for chat completions

Storage configurations (build data stores):
- LocalStorage: SQLite under a local data directory

Example:
    from mockgen import MockGen, LiteLLMProvider, LocalStorage

    mg = MockGen(
        provider=LiteLLMProvider(llm="perplexity/sonar-reasoning"),
        storage=LocalStorage("./mockgen_data"),
    )
"""

from mockgen.configuration.base import ProviderConfig, StorageConfig
from mockgen.configuration.providers import LiteLLMProvider
from mockgen.configuration.storage import LocalStorage

__all__ = [
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
]
