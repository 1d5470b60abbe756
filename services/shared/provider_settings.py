from __future__ import annotations

"""
Configuration for the username suggestion provider.

Settings are read once from environment variables when the app starts and
handed to the provider as an immutable value. Malformed tuning values fail
fast, but a missing API key is deliberately tolerated here: it only surfaces
as a generation error when a search is attempted.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ProviderSettingsError(RuntimeError):
    """Raised when provider configuration cannot be constructed."""


@dataclass(frozen=True, slots=True)
class OpenAIConfig:
    api_key: Optional[str]
    model: str
    api_base: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ProviderSettings:
    timeout_seconds: float
    temperature: float
    top_p: float
    max_output_tokens: int
    suggestion_count: int
    strict_charset: bool
    openai: OpenAIConfig


def load_provider_settings(
    *,
    timeout_env: str = "USERNAME_PROVIDER_TIMEOUT_SECONDS",
    temperature_env: str = "USERNAME_PROVIDER_TEMPERATURE",
    top_p_env: str = "USERNAME_PROVIDER_TOP_P",
    max_tokens_env: str = "USERNAME_PROVIDER_MAX_TOKENS",
    suggestion_count_env: str = "USERNAME_PROVIDER_SUGGESTION_COUNT",
    strict_charset_env: str = "USERNAME_PROVIDER_STRICT_CHARSET",
    default_timeout: float = 30.0,
    default_temperature: float = 0.8,
    default_top_p: float = 0.9,
    default_max_tokens: int = 512,
    default_suggestion_count: int = 20,
) -> ProviderSettings:
    """
    Construct ProviderSettings from the process environment.

    Args:
        timeout_env: Env var that overrides the outbound request timeout.
        temperature_env: Env var that tunes generation randomness.
        top_p_env: Env var that tunes nucleus sampling.
        max_tokens_env: Env var that caps model responses.
        suggestion_count_env: Env var for how many candidates the prompt asks for.
        strict_charset_env: Env var enabling the local letters/digits/underscore check.
        default_*: Fallback values when the env var is unset/empty.
    """

    timeout_seconds = _parse_float(os.getenv(timeout_env), default_timeout, timeout_env)
    if timeout_seconds <= 0:
        raise ProviderSettingsError(f"{timeout_env} must be positive (received {timeout_seconds})")

    temperature = _parse_float(os.getenv(temperature_env), default_temperature, temperature_env)
    if not 0.0 <= temperature <= 2.0:
        raise ProviderSettingsError(f"{temperature_env} must be between 0 and 2 (received {temperature})")

    top_p = _parse_float(os.getenv(top_p_env), default_top_p, top_p_env)
    if not 0.0 < top_p <= 1.0:
        raise ProviderSettingsError(f"{top_p_env} must be in (0, 1] (received {top_p})")

    max_output_tokens = _parse_int(os.getenv(max_tokens_env), default_max_tokens, max_tokens_env)
    suggestion_count = _parse_int(
        os.getenv(suggestion_count_env), default_suggestion_count, suggestion_count_env
    )
    if max_output_tokens < 1 or suggestion_count < 1:
        raise ProviderSettingsError(
            f"{max_tokens_env} and {suggestion_count_env} must be positive integers"
        )

    return ProviderSettings(
        timeout_seconds=timeout_seconds,
        temperature=temperature,
        top_p=top_p,
        max_output_tokens=max_output_tokens,
        suggestion_count=suggestion_count,
        strict_charset=_parse_bool(os.getenv(strict_charset_env), False, strict_charset_env),
        openai=_build_openai_config(),
    )


def _parse_float(raw_value: Optional[str], default: float, env_key: str) -> float:
    if raw_value is None or raw_value.strip() == "":
        return default

    try:
        return float(raw_value)
    except ValueError as exc:
        raise ProviderSettingsError(f"{env_key} must be numeric (received '{raw_value}')") from exc


def _parse_int(raw_value: Optional[str], default: int, env_key: str) -> int:
    if raw_value is None or raw_value.strip() == "":
        return default

    try:
        return int(raw_value)
    except ValueError as exc:
        raise ProviderSettingsError(f"{env_key} must be an integer (received '{raw_value}')") from exc


def _parse_bool(raw_value: Optional[str], default: bool, env_key: str) -> bool:
    if raw_value is None or raw_value.strip() == "":
        return default

    candidate = raw_value.strip().lower()
    if candidate in _TRUE_VALUES:
        return True
    if candidate in _FALSE_VALUES:
        return False
    raise ProviderSettingsError(f"{env_key} must be a boolean (received '{raw_value}')")


def _build_openai_config() -> OpenAIConfig:
    # The key stays optional; the provider reports its absence per request.
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip() or None
    model = (os.getenv("OPENAI_MODEL") or "").strip() or DEFAULT_OPENAI_MODEL
    api_base = (os.getenv("OPENAI_API_BASE") or "").strip() or None
    return OpenAIConfig(api_key=api_key, model=model, api_base=api_base)
