"""AI providers - text generation via Agno."""

from .config import (
    GenerationSettings,
    ProviderConfig,
    ProviderSettings,
    TextProviderConfig,
    load_provider_config,
)
from .text import TextCollaborator, TextProvider

__all__ = [
    "GenerationSettings",
    "ProviderConfig",
    "ProviderSettings",
    "TextCollaborator",
    "TextProvider",
    "TextProviderConfig",
    "load_provider_config",
]
