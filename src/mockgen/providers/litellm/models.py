# src/mockgen/providers/litellm/models.py
"""Curated chat model constants for the LiteLLM provider.

These are convenience constants for IDE autocomplete. You can always pass
any valid LiteLLM model string directly.

Example:
    from mockgen.providers.litellm import ChatModels, LiteLLMClient

    client = LiteLLMClient(model=ChatModels.SONAR_REASONING)

    # Custom models still work
    client = LiteLLMClient(model="my-custom/model")
"""


class ChatModels:
    """Chat/completion models for ClientQuestionGenerator (via LiteLLMClient)."""

    # Perplexity - reasoning models (use the "reasoning" generation preset)
    SONAR_REASONING = "perplexity/sonar-reasoning"
    SONAR_REASONING_PRO = "perplexity/sonar-reasoning-pro"
    SONAR = "perplexity/sonar"
    SONAR_PRO = "perplexity/sonar-pro"

    # Groq - fast hosted open models
    GROQ_LLAMA_33_70B = "groq/llama-3.3-70b-versatile"
    GROQ_LLAMA_31_8B = "groq/llama-3.1-8b-instant"
    GROQ_DEEPSEEK_R1_70B = "groq/deepseek-r1-distill-llama-70b"

    # OpenAI
    GPT_4O = "openai/gpt-4o"
    GPT_4O_MINI = "openai/gpt-4o-mini"

    # Google Gemini
    GEMINI_25_FLASH = "gemini/gemini-2.5-flash"

    # Anthropic
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"


DEFAULT_MODEL = ChatModels.SONAR_REASONING
