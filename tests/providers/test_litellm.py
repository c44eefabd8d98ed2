# tests/providers/test_litellm.py
"""Tests for the LiteLLM chat client."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytest.importorskip("litellm", reason="Tests require litellm package")

from mockgen.providers.base import LLMClient
from mockgen.providers.litellm import DEFAULT_MODEL, ChatModels, LiteLLMClient

MESSAGES = [{"role": "user", "content": "Hello"}]


def mock_completion_response(content: str | None):
    """Create a mock LiteLLM completion response."""
    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = content
    return mock_response


class TestLiteLLMClient:
    def test_is_llm_client(self):
        assert isinstance(LiteLLMClient(), LLMClient)

    def test_default_model(self):
        assert LiteLLMClient().model == DEFAULT_MODEL == ChatModels.SONAR_REASONING

    @patch("mockgen.providers.litellm.client.litellm.completion")
    def test_complete(self, mock_completion):
        mock_completion.return_value = mock_completion_response("Question 1: ...")

        result = LiteLLMClient(model="groq/llama-3.1-8b-instant").complete(MESSAGES)

        assert result == "Question 1: ..."
        kwargs = mock_completion.call_args.kwargs
        assert kwargs["model"] == "groq/llama-3.1-8b-instant"
        assert kwargs["messages"] == MESSAGES
        assert kwargs["drop_params"] is True
        assert kwargs["num_retries"] == 0
        assert "temperature" not in kwargs
        assert "max_tokens" not in kwargs
        assert "api_key" not in kwargs
        assert "api_base" not in kwargs

    @patch("mockgen.providers.litellm.client.litellm.completion")
    def test_complete_passes_options(self, mock_completion):
        mock_completion.return_value = mock_completion_response("ok")
        client = LiteLLMClient(
            api_key="pplx-test",
            api_base="https://proxy.local/v1",
            timeout=30.0,
            num_retries=2,
        )

        client.complete(MESSAGES, temperature=0.6, max_tokens=1350)

        kwargs = mock_completion.call_args.kwargs
        assert kwargs["temperature"] == 0.6
        assert kwargs["max_tokens"] == 1350
        assert kwargs["api_key"] == "pplx-test"
        assert kwargs["api_base"] == "https://proxy.local/v1"
        assert kwargs["timeout"] == 30.0
        assert kwargs["num_retries"] == 2

    @patch("mockgen.providers.litellm.client.litellm.completion")
    def test_none_content_raises(self, mock_completion):
        mock_completion.return_value = mock_completion_response(None)
        with pytest.raises(ValueError, match="None content"):
            LiteLLMClient().complete(MESSAGES)

    @patch("mockgen.providers.litellm.client.litellm.completion")
    def test_no_choices_raises(self, mock_completion):
        response = MagicMock()
        response.choices = []
        mock_completion.return_value = response
        with pytest.raises(ValueError, match="no choices"):
            LiteLLMClient().complete(MESSAGES)

    @pytest.mark.asyncio
    @patch("mockgen.providers.litellm.client.litellm.acompletion", new_callable=AsyncMock)
    async def test_acomplete(self, mock_acompletion):
        mock_acompletion.return_value = mock_completion_response("async text")

        result = await LiteLLMClient().acomplete(MESSAGES, temperature=0.5, max_tokens=900)

        assert result == "async text"
        kwargs = mock_acompletion.call_args.kwargs
        assert kwargs["temperature"] == 0.5
        assert kwargs["max_tokens"] == 900
        assert kwargs["drop_params"] is True


class TestDefaultAcomplete:
    @pytest.mark.asyncio
    async def test_falls_back_to_complete(self):
        class SyncOnly(LLMClient):
            def complete(self, messages, temperature=None, max_tokens=None):
                return f"{len(messages)} messages at {temperature}"

        assert await SyncOnly().acomplete(MESSAGES, temperature=0.7) == "1 messages at 0.7"
