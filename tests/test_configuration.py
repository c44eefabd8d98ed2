# tests/test_configuration.py
"""Tests for the configuration module."""

import os
from dataclasses import FrozenInstanceError

import pytest

from mockgen.configuration import LiteLLMProvider, LocalStorage, ProviderConfig, StorageConfig
from mockgen.configuration.storage.local import SESSIONS_DB
from mockgen.question_generator import ClientQuestionGenerator
from mockgen.settings import Settings
from mockgen.stores import SQLiteSessionStore


class TestLocalStorage:
    def test_build_store(self, temp_dir):
        """Test that LocalStorage.build_store() creates a SQLite session store."""
        store = LocalStorage(temp_dir).build_store()
        assert isinstance(store, SQLiteSessionStore)
        assert store.db_path == os.path.join(temp_dir, SESSIONS_DB)

    def test_build_store_creates_directory(self, temp_dir):
        """Test that LocalStorage creates directory if it doesn't exist."""
        new_dir = os.path.join(temp_dir, "new_storage")
        LocalStorage(new_dir).build_store()
        assert os.path.isdir(new_dir)

    def test_is_frozen_dataclass(self, temp_dir):
        """Test that LocalStorage is immutable."""
        storage = LocalStorage(temp_dir)
        with pytest.raises(FrozenInstanceError):
            storage.data_dir = "/other/path"  # type: ignore[misc]

    def test_satisfies_protocol(self, temp_dir):
        assert isinstance(LocalStorage(temp_dir), StorageConfig)


class TestLiteLLMProvider:
    def test_build_llm_client(self):
        pytest.importorskip("litellm", reason="This test requires litellm")
        provider = LiteLLMProvider(
            llm="groq/llama-3.3-70b-versatile",
            api_key="gsk-test",
            api_base="https://proxy.local",
        )
        client = provider.build_llm_client(Settings(num_retries=2))

        assert client.model == "groq/llama-3.3-70b-versatile"
        assert client.api_key == "gsk-test"
        assert client.api_base == "https://proxy.local"
        assert client.num_retries == 2

    def test_build_llm_client_without_settings(self):
        pytest.importorskip("litellm", reason="This test requires litellm")
        client = LiteLLMProvider(llm="openai/gpt-4o").build_llm_client()
        assert client.num_retries == 0

    def test_build_question_generator_detects_preset(self):
        pytest.importorskip("litellm", reason="This test requires litellm")
        generator = LiteLLMProvider(llm="perplexity/sonar-reasoning").build_question_generator(
            Settings()
        )
        assert isinstance(generator, ClientQuestionGenerator)
        assert generator.settings.generation_preset == "reasoning"

    def test_explicit_settings_kept(self):
        pytest.importorskip("litellm", reason="This test requires litellm")
        generator = LiteLLMProvider(llm="groq/llama-3.1-8b-instant").build_question_generator(
            Settings(max_retries=1)
        )
        assert generator.settings.generation_preset == "fast"
        assert generator.settings.max_retries == 1

    def test_satisfies_protocol(self):
        assert isinstance(LiteLLMProvider(llm="openai/gpt-4o"), ProviderConfig)

    def test_is_frozen_dataclass(self):
        provider = LiteLLMProvider(llm="openai/gpt-4o")
        with pytest.raises(FrozenInstanceError):
            provider.llm = "other"  # type: ignore[misc]
