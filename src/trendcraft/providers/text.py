"""Text generation provider using the Agno framework.

Tries each enabled provider in priority order until one answers. Every
request and response is written to the ``ai_calls`` logger.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Protocol

from .config import ProviderConfig, TextProviderConfig, load_provider_config

_logger = logging.getLogger("ai_calls")


class TextCollaborator(Protocol):
    """Anything that turns a prompt into text (may raise)."""

    async def generate(self, prompt: str, **kwargs: Any) -> str: ...


def _get_lmstudio_model(base_url: str) -> str | None:
    """Query LMStudio for the currently loaded model.

    Args:
        base_url: LMStudio API base URL.

    Returns:
        Model ID string or None if unavailable.
    """
    import httpx

    try:
        with httpx.Client(timeout=5.0) as client:
            response = client.get(f"{base_url}/models")
            if response.status_code == 200:
                models = response.json().get("data", [])
                if models:
                    return models[0].get("id")
    except httpx.HTTPError as e:
        _logger.debug(f"Could not query LMStudio models: {e}")

    return None


def _create_agno_model(provider_name: str, provider_config: TextProviderConfig) -> Any:
    """Create an Agno model instance for the given provider."""
    model_id = provider_config.model_id
    api_key = provider_config.get_api_key()
    base_url = provider_config.get_base_url()

    # Agno models are imported lazily so only the configured SDKs are needed
    if provider_name == "gemini":
        from agno.models.google import Gemini
        return Gemini(id=model_id, api_key=api_key)

    elif provider_name == "openai":
        from agno.models.openai import OpenAIChat
        return OpenAIChat(id=model_id, api_key=api_key)

    elif provider_name == "anthropic":
        from agno.models.anthropic import Claude
        return Claude(id=model_id, api_key=api_key)

    elif provider_name == "groq":
        from agno.models.groq import Groq
        return Groq(id=model_id, api_key=api_key)

    elif provider_name == "ollama":
        from agno.models.ollama import Ollama
        return Ollama(id=model_id, host=base_url or "http://localhost:11434")

    elif provider_name == "lmstudio":
        from agno.models.lmstudio import LMStudio

        lmstudio_url = base_url or "http://localhost:1234/v1"
        if model_id == "local-model":
            model_id = _get_lmstudio_model(lmstudio_url) or model_id
        return LMStudio(id=model_id, base_url=lmstudio_url)

    else:
        # Anything else is assumed to speak the OpenAI API
        from agno.models.openai.like import OpenAILike
        return OpenAILike(id=model_id, api_key=api_key, base_url=base_url)


class TextProvider:
    """Unified text generation provider.

    Usage:
        provider = TextProvider()
        text = await provider.generate("Write a tweet about coffee")
    """

    def __init__(self, config: ProviderConfig | None = None):
        """Initialize the text provider.

        Args:
            config: Provider configuration. If None, loads from default config file.
        """
        self.config = config or load_provider_config()
        self._current_provider: str | None = None
        self._total_calls = 0

    async def _complete(
        self,
        provider_name: str,
        provider_config: TextProviderConfig,
        prompt: str,
        system: str | None,
    ) -> str:
        """Run a single completion against one provider."""
        from agno.agent import Agent

        model = _create_agno_model(provider_name, provider_config)
        agent = Agent(model=model, instructions=system, markdown=False)
        response = await agent.arun(prompt)
        return response.content or ""

    async def generate(
        self,
        prompt: str,
        system: str | None = None,
        task: str | None = None,
        **kwargs: Any,
    ) -> str:
        """Generate text completion.

        Args:
            prompt: The user prompt to send to the model.
            system: Optional system prompt for context.
            task: Optional task name for log records.

        Returns:
            Generated text response.

        Raises:
            RuntimeError: If no provider is configured.
            Exception: The last provider error when every provider failed.
        """
        providers = self.config.get_enabled_text_providers()
        last_error: Exception | None = None

        for provider_name, provider_config in providers:
            try:
                self._current_provider = provider_name
                start_time = time.time()

                _logger.info(
                    f"AI_REQUEST | provider:{provider_name} | model:{provider_config.model} | task:{task}\n"
                    f"--- SYSTEM ---\n{system or '(none)'}\n"
                    f"--- PROMPT ---\n{prompt}\n"
                    f"--- END REQUEST ---"
                )

                result = await self._complete(provider_name, provider_config, prompt, system)

                duration = time.time() - start_time
                self._total_calls += 1

                _logger.info(
                    f"AI_RESPONSE | provider:{provider_name} | model:{provider_config.model} | "
                    f"task:{task} | duration:{duration:.2f}s\n"
                    f"--- RESPONSE ---\n{result}\n"
                    f"--- END RESPONSE ---"
                )
                return result

            except Exception as e:
                last_error = e
                _logger.warning(f"Provider {provider_name} failed: {e}")
                if self.config.provider_settings.fallback_on_error:
                    continue
                raise

        if last_error:
            raise last_error
        raise RuntimeError("No providers available")

    @property
    def current_provider(self) -> str | None:
        """Get the name of the last used provider."""
        return self._current_provider

    @property
    def total_calls(self) -> int:
        """Number of successful completions so far."""
        return self._total_calls
