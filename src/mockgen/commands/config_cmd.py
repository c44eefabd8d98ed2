# src/mockgen/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

import os
from pathlib import Path

import yaml  # type: ignore[import-untyped]

from mockgen.commands.base import ConfigResult, SettingInfo
from mockgen.config import (
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    resolve_data_dir,
    validate_config,
)
from mockgen.providers.litellm.models import DEFAULT_MODEL
from mockgen.settings import GENERATION_PRESETS

# Display order
SETTING_KEYS = (
    "generation_preset",
    "concurrency_limit",
    "min_batch_size",
    "max_batch_size",
    "max_retries",
    "backoff_base",
    "request_timeout",
    "base_tokens",
    "tokens_per_question",
    "max_tokens_cap",
    "temperature",
    "fill_temperature",
    "non_english_temperature_offset",
    "max_fill_iterations",
    "fingerprint_length",
    "fingerprint_options",
    "default_medium",
    "num_retries",
)


def _get_setting_source(
    key: str,
    yaml_settings: dict,
    env_settings: dict,
    preset: str | None,
) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    if preset and key in GENERATION_PRESETS.get(preset, {}):
        return "preset"
    return "default"


def config(
    config_path: str | Path | None = None,
) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    try:
        cli_config = load_config(config_path)
        env_settings = get_settings_from_env()
        yaml_settings = get_settings_from_yaml(cli_config)
        settings = build_settings(cli_config, env_settings)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return ConfigResult(success=False, error=f"Invalid configuration: {e}")

    found_config_path = Path(config_path) if config_path else find_config_file()

    result = ConfigResult(success=True)
    result.config_path = str(found_config_path) if found_config_path else None
    result.warnings = validate_config(cli_config, found_config_path)
    result.provider = cli_config.get("provider", "litellm")

    if result.provider == "litellm":
        result.llm_model = (
            cli_config.get("llm_model")
            or os.environ.get("MOCKGEN_LITELLM_LLM_MODEL")
            or DEFAULT_MODEL
        )
    else:
        result.llm_model = cli_config.get("llm_client")

    result.data_dir = resolve_data_dir(cli_config)

    for key in SETTING_KEYS:
        value = getattr(settings, key)
        result.settings.append(
            SettingInfo(
                name=key,
                value="auto" if value is None else str(value),
                source=_get_setting_source(
                    key, yaml_settings, env_settings, settings.generation_preset
                ),
            )
        )

    return result

