# src/mockgen/settings.py
"""Configuration management for mockgen.

This module contains behavioral settings for the generation pipeline that
apply regardless of which LLM provider is used. Settings are passed
programmatically - the library does not read from environment variables.

For applications that want env-based config, read env vars at the
application layer (see mockgen.config) and pass values explicitly.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

# Generation preset definitions for the two kinds of upstream model
# - "reasoning": slow reasoning models that think before answering
# - "fast": low-latency models on rate-limited plans
GENERATION_PRESETS: dict[str, dict[str, Any]] = {
    "reasoning": {
        "concurrency_limit": 4,
        "request_timeout": 90.0,
        "max_retries": 3,
        "tokens_per_question": 150,
    },
    "fast": {
        "concurrency_limit": 2,
        "request_timeout": 45.0,
        "max_retries": 5,
        "tokens_per_question": 120,
    },
}

# Substrings that mark a reasoning model (used for auto-detection)
REASONING_MODEL_MARKERS = ("reasoning", "sonar", "-r1", "thinking")

ENGLISH_MEDIA = {"english", "en"}


def detect_generation_preset(model: str) -> Literal["reasoning", "fast"]:
    """Auto-detect the generation preset from a model name.

    Args:
        model: The model identifier (e.g., "perplexity/sonar-reasoning")

    Returns:
        "reasoning" for reasoning models, "fast" otherwise
    """
    name = model.lower().rsplit("/", 1)[-1]
    if any(marker in name for marker in REASONING_MODEL_MARKERS):
        return "reasoning"
    return "fast"


class Settings(BaseModel):
    """Behavioral settings for question generation.

    Example:
        settings = Settings(concurrency_limit=2, max_fill_iterations=5)

        # Or start from a preset for the kind of model in use
        settings = Settings.with_preset("fast")
    """

    generation_preset: Literal["reasoning", "fast"] | None = None

    # Fan-out
    concurrency_limit: int = Field(default=4, ge=1)
    min_batch_size: int = Field(default=3, ge=1)
    max_batch_size: int = Field(default=15, ge=1)

    # Per-batch retry
    max_retries: int = Field(default=3, ge=1)
    backoff_base: float = Field(default=0.5, ge=0.0)  # seconds, doubled per attempt
    request_timeout: float = Field(default=90.0, gt=0.0)  # seconds per upstream call

    # Token budget: min(max_tokens_cap, base_tokens + tokens_per_question * count)
    base_tokens: int = Field(default=600, ge=0)
    tokens_per_question: int = Field(default=150, ge=1)
    max_tokens_cap: int = Field(default=4000, ge=1)

    # Sampling
    temperature: float = Field(default=0.6, ge=0.0, le=2.0)
    fill_temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    non_english_temperature_offset: float = Field(default=0.1, ge=0.0)

    # Fill loop
    max_fill_iterations: int = Field(default=10, ge=0)

    # Deduplication fingerprint
    fingerprint_length: int = Field(default=160, ge=1)
    fingerprint_options: int = Field(default=1, ge=1, le=2)

    default_medium: str = "English"

    # Upstream retries inside litellm (rate limits); separate from max_retries
    num_retries: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_batch_bounds(self) -> Settings:
        if self.min_batch_size > self.max_batch_size:
            raise ValueError(
                f"min_batch_size ({self.min_batch_size}) must not exceed "
                f"max_batch_size ({self.max_batch_size})"
            )
        # Merged planner batches reach at most 3 * min_batch_size - 2.
        if self.max_batch_size < 3 * self.min_batch_size - 2:
            raise ValueError(
                f"max_batch_size ({self.max_batch_size}) must be at least "
                f"3 * min_batch_size - 2 ({3 * self.min_batch_size - 2})"
            )
        return self

    @classmethod
    def with_preset(
        cls,
        preset: Literal["reasoning", "fast"],
        **overrides: Any,
    ) -> Settings:
        """Create Settings from a generation preset.

        Args:
            preset: The preset to use.
            **overrides: Additional settings to override preset defaults.

        Returns:
            Settings instance with preset values applied.

        Example:
            settings = Settings.with_preset("fast", max_fill_iterations=4)
        """
        if preset not in GENERATION_PRESETS:
            raise ValueError(
                f"Unknown preset '{preset}'. "
                f"Available presets: {list(GENERATION_PRESETS.keys())}"
            )

        preset_settings: dict[str, Any] = GENERATION_PRESETS[preset].copy()
        preset_settings["generation_preset"] = preset
        preset_settings.update(overrides)
        return cls(**preset_settings)

    def for_model(self, model: str) -> Settings:
        """Apply the auto-detected preset for a model to unset fields.

        Explicitly set fields always win. If generation_preset is already
        set, the settings are returned unchanged.
        """
        if self.generation_preset is not None:
            return self
        preset = detect_generation_preset(model)
        explicit = {name: getattr(self, name) for name in self.model_fields_set}
        return Settings.with_preset(preset, **explicit)

    def max_tokens_for(self, count: int) -> int:
        """Token budget for a batch of `count` questions."""
        return min(self.max_tokens_cap, self.base_tokens + self.tokens_per_question * count)

    def temperature_for(self, medium: str | None = None, fill: bool = False) -> float:
        """Sampling temperature for a batch.

        Fill batches use fill_temperature. Non-English media are lowered by
        non_english_temperature_offset. Result is clamped to [0.5, 0.7].
        """
        if fill:
            value = self.fill_temperature
        elif medium and medium.strip().lower() not in ENGLISH_MEDIA:
            value = self.temperature - self.non_english_temperature_offset
        else:
            value = self.temperature
        return round(max(0.5, min(0.7, value)), 2)
