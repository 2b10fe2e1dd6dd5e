"""Provider configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

# Load .env file
load_dotenv()

CONFIG_PATH_ENV = "TRENDCRAFT_PROVIDERS"


class ProviderSettings(BaseModel):
    """Global provider settings."""

    timeout_seconds: float = 30.0
    fallback_on_error: bool = True


class GenerationSettings(BaseModel):
    """Bounds used when assembling generated content."""

    reach_min: int = 5_000
    reach_max: int = 50_000
    min_fallback_hashtags: int = 2
    max_fallback_hashtags: int = 5

    @model_validator(mode="after")
    def _check_bounds(self) -> "GenerationSettings":
        if self.reach_min < 0 or self.reach_max < self.reach_min:
            raise ValueError(f"Invalid reach bounds: {self.reach_min}-{self.reach_max}")
        if self.min_fallback_hashtags < 1 or self.max_fallback_hashtags < self.min_fallback_hashtags:
            raise ValueError(
                f"Invalid fallback hashtag bounds: "
                f"{self.min_fallback_hashtags}-{self.max_fallback_hashtags}"
            )
        return self


class TextProviderConfig(BaseModel):
    """Configuration for a text provider."""

    priority: int
    enabled: bool = True
    model: str
    base_url: str | None = None
    base_url_env: str | None = None
    api_key: str | None = None
    api_key_env: str | None = None

    def get_api_key(self) -> str | None:
        """Get API key from config or environment."""
        if self.api_key:
            return self.api_key
        if self.api_key_env:
            return os.getenv(self.api_key_env)
        return None

    def get_base_url(self) -> str | None:
        """Get base URL from config or environment."""
        if self.base_url:
            return self.base_url
        if self.base_url_env:
            return os.getenv(self.base_url_env)
        return None

    @property
    def model_id(self) -> str:
        """Model ID without the provider prefix ("gemini/x" -> "x")."""
        if "/" in self.model:
            return self.model.split("/", 1)[1]
        return self.model


class ProviderConfig(BaseModel):
    """Full provider configuration."""

    provider_settings: ProviderSettings = Field(default_factory=ProviderSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    text_providers: dict[str, TextProviderConfig] = Field(default_factory=dict)

    def get_enabled_text_providers(self) -> list[tuple[str, TextProviderConfig]]:
        """Get enabled text providers sorted by priority."""
        enabled = [
            (name, config)
            for name, config in self.text_providers.items()
            if config.enabled
        ]
        return sorted(enabled, key=lambda x: x[1].priority)


def default_config_path() -> Path:
    """Get the providers.yaml path (env override, else project config/)."""
    override = os.getenv(CONFIG_PATH_ENV)
    if override:
        return Path(override)
    return Path(__file__).parent.parent.parent.parent / "config" / "providers.yaml"


def load_provider_config(config_path: Path | None = None) -> ProviderConfig:
    """Load provider configuration from YAML file."""
    if config_path is None:
        config_path = default_config_path()

    if not config_path.exists():
        # Return default config if file doesn't exist
        return ProviderConfig()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return ProviderConfig(**data)
