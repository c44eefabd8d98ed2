# src/mockgen/config.py
"""Reading mockgen configuration from disk and the environment.

Used by the CLI commands and by applications that embed mockgen. Sources,
strongest first:

- ``MOCKGEN_*`` environment variables (a ``.env`` file may supply them)
- ``mockgen.yaml`` found in the working directory or one of its parents
- the generation preset picked from the model name
- ``Settings`` defaults
"""

from __future__ import annotations

import importlib
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import yaml  # type: ignore[import-untyped]

from mockgen.providers.litellm.models import DEFAULT_MODEL

if TYPE_CHECKING:
    from mockgen.mockgen import MockGen
    from mockgen.settings import Settings
    from mockgen.stores import SessionStore

DEFAULT_DATA_DIR = "./mockgen_data"
CONFIG_FILES = ["mockgen.yaml", "mockgen.yml", ".mockgenrc"]
ENV_FILE = ".env"
ENV_PREFIX = "MOCKGEN_"
MAX_SEARCH_DEPTH = 10

VALID_ROOT_KEYS = {
    "provider",
    "llm_model",
    "api_base",
    "data_dir",
    "llm_client",
    "llm_client_kwargs",
    "settings",
}

INT_SETTINGS = (
    "concurrency_limit",
    "min_batch_size",
    "max_batch_size",
    "max_retries",
    "base_tokens",
    "tokens_per_question",
    "max_tokens_cap",
    "max_fill_iterations",
    "fingerprint_length",
    "fingerprint_options",
    "num_retries",
)
FLOAT_SETTINGS = (
    "backoff_base",
    "request_timeout",
    "temperature",
    "fill_temperature",
    "non_english_temperature_offset",
)
STR_SETTINGS = (
    "generation_preset",
    "default_medium",
)

VALID_SETTINGS_KEYS = {*INT_SETTINGS, *FLOAT_SETTINGS, *STR_SETTINGS}


@dataclass
class ConfigError:
    """A configuration problem, reported instead of raised."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Copy ``KEY=value`` pairs from a dotenv file into ``os.environ``.

    Variables that are already set win over the file. A missing file is
    not an error.
    """
    path = Path(env_path)
    if not path.exists():
        return

    for raw in path.read_text(encoding="utf-8").splitlines():
        entry = raw.strip()
        if entry.startswith("#") or "=" not in entry:
            continue
        name, _, value = entry.partition("=")
        os.environ.setdefault(name.strip(), value.strip().strip("\"'"))


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest config file at or above ``start_dir`` (default: cwd)."""
    directory = start_dir or Path.cwd()
    for _ in range(MAX_SEARCH_DEPTH):
        found = next(
            (directory / name for name in CONFIG_FILES if (directory / name).exists()), None
        )
        if found is not None:
            return found
        if directory.parent == directory:
            return None
        directory = directory.parent
    return None


def env_var_name(setting: str) -> str:
    """Environment variable that overrides a setting (e.g. MOCKGEN_CONCURRENCY_LIMIT)."""
    return f"{ENV_PREFIX}{setting.upper()}"


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Describe keys in ``config`` that mockgen does not recognise.

    Unknown keys are usually typos, so they are reported as warnings
    rather than rejected.
    """
    warnings = []
    where = str(config_path) if config_path else "config"

    stray = sorted(set(config) - VALID_ROOT_KEYS)
    if stray:
        warnings.append(f"Unknown config keys in {where}: {', '.join(stray)}")

    section = config.get("settings", {})
    if isinstance(section, dict):
        stray = sorted(set(section) - VALID_SETTINGS_KEYS)
        if stray:
            warnings.append(f"Unknown settings keys: {', '.join(stray)}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Parse the YAML config at ``config_path``, or the nearest one found.

    Returns an empty dict when there is no config file. Read and YAML
    errors propagate.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        return {}

    with path.open(encoding="utf-8") as handle:
        return cast(dict[str, Any], yaml.safe_load(handle) or {})


def resolve_data_dir(config: dict[str, Any], data_dir: str | None = None) -> str:
    """Pick the data directory: explicit argument, then config, then default."""
    return data_dir or config.get("data_dir") or DEFAULT_DATA_DIR


def _parsed(raw: str | None, convert: Callable[[str], Any]) -> Any:
    if raw is None:
        return None
    try:
        return convert(raw)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Collect settings explicitly set through ``MOCKGEN_*`` variables.

    Variables holding unparseable numbers, or empty strings, are skipped.
    """
    converters: list[tuple[tuple[str, ...], Callable[[str], Any]]] = [
        (INT_SETTINGS, int),
        (FLOAT_SETTINGS, float),
        (STR_SETTINGS, str),
    ]
    found: dict[str, Any] = {}
    for names, convert in converters:
        for name in names:
            value = _parsed(os.environ.get(env_var_name(name)), convert)
            if value not in (None, ""):
                found[name] = value
    return found


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Known keys from the ``settings:`` section of a loaded config."""
    section = config.get("settings") or {}
    return {name: value for name, value in section.items() if name in VALID_SETTINGS_KEYS}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Merge YAML and environment settings into a ``Settings``.

    Environment values override YAML values. When a ``generation_preset``
    is named, its values fill whatever neither source set.

    Args:
        config: Loaded YAML config (may be None)
        env_settings: Overrides to use instead of reading the environment

    Raises:
        ValueError: If the merged values are invalid.
    """
    from mockgen.settings import Settings

    if env_settings is None:
        env_settings = get_settings_from_env()
    merged = get_settings_from_yaml(config or {}) | env_settings

    preset = merged.pop("generation_preset", None)
    if preset:
        return Settings.with_preset(preset, **merged)
    return Settings(**merged)


def get_store(data_dir: str | Path) -> SessionStore:
    """Open the session store in ``data_dir`` without any provider setup."""
    from mockgen.configuration import LocalStorage

    return LocalStorage(str(data_dir)).build_store()


def open_store(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SessionStore | None:
    """Open the configured session store, or None if nothing was stored yet."""
    location = resolve_data_dir(load_config(config_path), data_dir)
    if not os.path.exists(location):
        return None
    return get_store(location)


def import_class(class_path: str) -> type[Any]:
    """Resolve ``package.module.ClassName`` to the class object.

    Raises:
        ImportError: If the module cannot be imported.
        AttributeError: If the module has no such class.
    """
    module_name, _, attr = class_path.rpartition(".")
    return cast(type[Any], getattr(importlib.import_module(module_name), attr))


@dataclass
class GeneratorConfig:
    """Everything needed to build a MockGen, resolved from config sources."""

    provider: str
    llm_model: str | None
    data_dir: str
    settings: Settings
    llm_api_key: str | None = None
    api_base: str | None = None
    llm_client_class: str | None = None
    llm_client_kwargs: dict[str, Any] = field(default_factory=dict)


def get_generator_config(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> GeneratorConfig | ConfigError:
    """Resolve provider, model, storage and settings without building anything.

    Problems come back as a ``ConfigError`` so each caller can report them
    in its own way.
    """
    try:
        config = load_config(config_path)
    except (OSError, yaml.YAMLError) as e:
        return ConfigError(
            message=f"Could not read config file: {e}",
            suggestion="Check the path and YAML syntax of your mockgen.yaml",
        )

    try:
        settings = build_settings(config, get_settings_from_env())
    except ValueError as e:
        return ConfigError(
            message=f"Invalid settings: {e}",
            suggestion="Fix the settings section of mockgen.yaml or the MOCKGEN_* variables",
        )

    provider = config.get("provider", "litellm")
    location = resolve_data_dir(config, data_dir)

    if provider == "litellm":
        return GeneratorConfig(
            provider=provider,
            llm_model=(
                config.get("llm_model")
                or os.environ.get("MOCKGEN_LITELLM_LLM_MODEL")
                or DEFAULT_MODEL
            ),
            data_dir=location,
            settings=settings,
            llm_api_key=os.environ.get("MOCKGEN_LLM_API_KEY"),
            api_base=config.get("api_base") or os.environ.get("MOCKGEN_LLM_API_BASE"),
        )

    if provider == "custom":
        if not config.get("llm_client"):
            return ConfigError(
                message="Custom provider requires llm_client.",
                suggestion="Set llm_client in mockgen.yaml to a dotted class path",
            )
        return GeneratorConfig(
            provider=provider,
            llm_model=None,
            data_dir=location,
            settings=settings,
            llm_client_class=config["llm_client"],
            llm_client_kwargs=config.get("llm_client_kwargs") or {},
        )

    return ConfigError(
        message=f"Unknown provider '{provider}'",
        suggestion="Use provider: litellm or provider: custom",
    )


@dataclass(frozen=True)
class CustomProvider:
    """Provider backed by a user-supplied ``LLMClient`` subclass.

    Args:
        llm_client_class: Dotted path to the client class.
        llm_client_kwargs: Constructor keyword arguments.
    """

    llm_client_class: str
    llm_client_kwargs: dict[str, Any] = field(default_factory=dict, hash=False)

    def build_llm_client(self, settings: Settings | None = None) -> Any:
        return import_class(self.llm_client_class)(**self.llm_client_kwargs)

    def build_question_generator(self, settings: Settings) -> Any:
        from mockgen.question_generator import ClientQuestionGenerator

        return ClientQuestionGenerator(
            llm_client=self.build_llm_client(settings), settings=settings
        )


def create_generator(config: GeneratorConfig) -> MockGen:
    """Build a MockGen for a resolved configuration.

    Raises:
        ValueError: If the provider is unknown or missing its model/client.
        ImportError: If a custom client class cannot be imported.
    """
    from mockgen.configuration import LiteLLMProvider, LocalStorage
    from mockgen.mockgen import MockGen

    provider: Any
    if config.provider == "litellm":
        if not config.llm_model:
            raise ValueError("LiteLLM provider requires llm_model")
        provider = LiteLLMProvider(
            llm=config.llm_model, api_key=config.llm_api_key, api_base=config.api_base
        )
    elif config.provider == "custom":
        if not config.llm_client_class:
            raise ValueError("Custom provider requires llm_client")
        provider = CustomProvider(
            llm_client_class=config.llm_client_class,
            llm_client_kwargs=config.llm_client_kwargs,
        )
    else:
        raise ValueError(f"Unknown provider: {config.provider}")

    return MockGen(
        provider=provider, storage=LocalStorage(config.data_dir), settings=config.settings
    )


def create_mockgen(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> MockGen | ConfigError:
    """``get_generator_config`` followed by ``create_generator``."""
    config = get_generator_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return config
    return create_generator(config)
