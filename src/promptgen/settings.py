# src/promptgen/settings.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

KEY_QUERY = "?key="


class Settings(BaseSettings):
    # generation API
    GEMINI_API_KEY: str
    GEMINI_BASE_URL: str

    # sampling
    AI_TEMPERATURE: float = Field(default=1.0)
    AI_TOP_P: float = Field(default=0.8)
    AI_MAX_TOKENS: int = Field(default=4096)
    AI_NUM_RESULTS: int = Field(default=10)  # sent as topK

    # transport: None means wait forever
    AI_TIMEOUT: Optional[float] = None

    LOG_LEVEL: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def endpoint_base(self) -> str:
        """Base URL guaranteed to end with the key query delimiter."""
        if self.GEMINI_BASE_URL.endswith(KEY_QUERY):
            return self.GEMINI_BASE_URL
        return self.GEMINI_BASE_URL + KEY_QUERY


def _load_yaml(config_path: str | Path) -> Dict[str, Any]:
    if not os.path.exists(config_path):
        raise ConfigError(f"Config file not found: {config_path}")
    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return {str(k).upper(): v for k, v in data.items()}


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Build settings from env/.env, with values from an optional YAML file on top."""
    overrides = _load_yaml(config_path) if config_path else {}
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise ConfigError(f"Failed to load configuration ({', '.join(missing)}): {e}") from e
