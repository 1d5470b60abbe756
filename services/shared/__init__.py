"""
Shared utilities for the Username Finder app.

This package contains code used by both the suggestion service and the UI:
- provider_settings: Configuration for the OpenAI-backed username provider
- observability: Logging and privacy utilities
"""

from .provider_settings import (
    DEFAULT_OPENAI_MODEL,
    OpenAIConfig,
    ProviderSettings,
    ProviderSettingsError,
    load_provider_settings,
)

__all__ = [
    "DEFAULT_OPENAI_MODEL",
    "OpenAIConfig",
    "ProviderSettings",
    "ProviderSettingsError",
    "load_provider_settings",
]
