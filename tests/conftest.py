"""Shared test fixtures and configuration.

Provides text-provider doubles and a provider config for testing the
content engine. Provider fixtures return AsyncMocks usable with await.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from trendcraft.providers.config import (
    ProviderConfig,
    ProviderSettings,
    TextProviderConfig,
)


@pytest.fixture
def mock_text_provider() -> AsyncMock:
    """Create a text provider that answers with a fixed post.

    Returns:
        AsyncMock configured as TextProvider.
    """
    provider = AsyncMock()
    provider.generate.return_value = (
        "New tips for brewing better coffee at home? Start with fresh beans 🔥 #coffee #barista"
    )
    return provider


@pytest.fixture
def failing_text_provider() -> AsyncMock:
    """Create a text provider whose every call raises."""
    provider = AsyncMock()
    provider.generate.side_effect = RuntimeError("provider unavailable")
    return provider


@pytest.fixture
def empty_text_provider() -> AsyncMock:
    """Create a text provider that returns only whitespace."""
    provider = AsyncMock()
    provider.generate.return_value = "   \n"
    return provider


@pytest.fixture
def slow_text_provider():
    """Create a text provider that never answers within a short timeout."""

    class _SlowProvider:
        async def generate(self, prompt: str, **kwargs) -> str:
            await asyncio.sleep(5)
            return "too late"

    return _SlowProvider()


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Config with two enabled providers and one disabled."""
    return ProviderConfig(
        provider_settings=ProviderSettings(timeout_seconds=5, fallback_on_error=True),
        text_providers={
            "primary": TextProviderConfig(priority=1, model="openai/test-model", api_key="key-1"),
            "secondary": TextProviderConfig(priority=2, model="openai/test-model-2", api_key="key-2"),
            "disabled": TextProviderConfig(priority=0, enabled=False, model="openai/off"),
        },
    )
