"""Capability providers and the factory choosing one from configuration."""

from __future__ import annotations

from aigw.core.config import GatewayConfig
from aigw.providers.base import CapabilityProvider, ProviderResponse
from aigw.providers.litellm_provider import LiteLLMProvider
from aigw.providers.openai_http import OpenAIHTTPProvider


def build_provider(config: GatewayConfig) -> OpenAIHTTPProvider | LiteLLMProvider:
    """Return the provider named by ``config.provider``."""
    if config.provider == "litellm":
        return LiteLLMProvider(api_key=config.api_key, api_base=config.api_base)
    return OpenAIHTTPProvider(
        api_key=config.api_key,
        api_base=config.api_base,
        timeout=config.timeout,
    )


__all__ = [
    "CapabilityProvider",
    "LiteLLMProvider",
    "OpenAIHTTPProvider",
    "ProviderResponse",
    "build_provider",
]
