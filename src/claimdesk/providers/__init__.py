"""LLM provider implementations for AI insights.

Currently supported providers:
- OpenAI (gpt-4o, gpt-4o-mini, etc.)
- Anthropic (claude-3-5-sonnet, claude-3-5-haiku, etc.)

Usage:
    from claimdesk.providers import create_provider

    provider = create_provider(
        provider_type="openai",
        api_key="sk-xxx",
        model="gpt-4o",
    )

    response = await provider.complete(
        system_prompt="You are an AI claims processing analyst...",
        user_prompt="Analyze the following data...",
        json_schema={"type": "object", ...},
    )
"""

import logging
from typing import Literal, Optional

from claimdesk.config import Settings
from claimdesk.providers.base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)

ProviderType = Literal["openai", "anthropic"]


def create_provider(
    provider_type: ProviderType,
    api_key: str,
    model: str | None = None,
    timeout: float = 60.0,
) -> LLMProvider:
    """Factory function to create LLM providers.

    Args:
        provider_type: The provider to use ("openai" or "anthropic")
        api_key: API key for the provider
        model: Optional model override (uses provider default if not specified)
        timeout: Per-request timeout in seconds

    Returns:
        Configured LLMProvider instance

    Raises:
        ValueError: If provider_type is unknown or api_key is missing
    """
    if not api_key:
        raise ValueError(f"API key is required for {provider_type} provider")

    if provider_type == "openai":
        from claimdesk.providers.openai_provider import OpenAIProvider

        return OpenAIProvider(
            api_key=api_key,
            model=model or "gpt-4o",
            timeout=timeout,
        )

    elif provider_type == "anthropic":
        from claimdesk.providers.anthropic_provider import AnthropicProvider

        return AnthropicProvider(
            api_key=api_key,
            model=model or "claude-3-5-sonnet-20241022",
            timeout=timeout,
        )

    else:
        raise ValueError(
            f"Unknown provider type: {provider_type}. "
            f"Supported providers: openai, anthropic"
        )


def provider_from_settings(config: Settings) -> Optional[LLMProvider]:
    """Build the configured provider, or None when no API key is set.

    A missing key is not an error here: the insights generator reports it
    through its fallback result.
    """
    if not config.llm_api_key:
        logger.warning(
            f"No API key configured for {config.llm_provider}; "
            "AI insights will return fallback results"
        )
        return None

    return create_provider(
        provider_type=config.llm_provider,
        api_key=config.llm_api_key,
        model=config.llm_model,
        timeout=config.insights_timeout_seconds,
    )


def get_available_providers() -> list[str]:
    """Get list of available provider types."""
    return ["openai", "anthropic"]


__all__ = [
    "LLMProvider",
    "LLMResponse",
    "ProviderType",
    "create_provider",
    "get_available_providers",
    "provider_from_settings",
]
