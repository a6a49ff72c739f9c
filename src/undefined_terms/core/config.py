"""
Central configuration for undefined-terms.

Supports environment variables for configuration:
- OLLAMA_API_KEY: Completion service credential (required)
- OLLAMA_HOST: Ollama API host (default: https://ollama.com)
- OLLAMA_MODEL: Model identifier (default: deepseek-v3.1:671b-cloud)
- UNDEFINED_TERMS_TEMPERATURE: Sampling temperature (default: 0.0)
- UNDEFINED_TERMS_LOG_LEVEL: Logging level (default: INFO)
- UNDEFINED_TERMS_LOG_FILE: Log file path (default: console only)
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from undefined_terms.core.errors import ConfigError

# ---- Completion service ----

DEFAULT_OLLAMA_HOST = "https://ollama.com"
DEFAULT_OLLAMA_MODEL = "deepseek-v3.1:671b-cloud"

# Deterministic output suits structured extraction
DEFAULT_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0

# ---- Logging ----

LOG_LEVEL = os.getenv("UNDEFINED_TERMS_LOG_LEVEL", "INFO")
_log_file = os.getenv("UNDEFINED_TERMS_LOG_FILE")
LOG_FILE: Optional[Path] = Path(_log_file) if _log_file else None


class Settings(BaseModel):
    """Resolved completion-service settings."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    host: str = DEFAULT_OLLAMA_HOST
    model: str = DEFAULT_OLLAMA_MODEL
    temperature: float = DEFAULT_TEMPERATURE


def parse_temperature(raw: str) -> float:
    try:
        temperature = float(raw)
    except ValueError:
        raise ConfigError(f"Temperature must be a number, got {raw!r}") from None
    if not 0.0 <= temperature <= MAX_TEMPERATURE:
        raise ConfigError(
            f"Temperature must be between 0 and {MAX_TEMPERATURE}, got {temperature}"
        )
    return temperature


def parse_model(raw: str) -> str:
    model = raw.strip()
    if not model:
        raise ConfigError("Model identifier is empty")
    return model


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read completion-service settings from the environment.

    Raises ConfigError when the credential or model identifier is missing,
    or the temperature is not a number in range. Called before any network
    traffic so misconfiguration fails fast.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get("OLLAMA_API_KEY") or "").strip()
    if not api_key:
        raise ConfigError(
            "OLLAMA_API_KEY not provided. Set the environment variable before running."
        )

    try:
        model = parse_model(env.get("OLLAMA_MODEL", DEFAULT_OLLAMA_MODEL))
    except ConfigError:
        raise ConfigError("OLLAMA_MODEL is set but empty") from None

    host = env.get("OLLAMA_HOST", DEFAULT_OLLAMA_HOST).strip() or DEFAULT_OLLAMA_HOST

    temperature = DEFAULT_TEMPERATURE
    raw_temperature = env.get("UNDEFINED_TERMS_TEMPERATURE")
    if raw_temperature is not None and raw_temperature.strip():
        temperature = parse_temperature(raw_temperature.strip())

    return Settings(api_key=api_key, host=host, model=model, temperature=temperature)
