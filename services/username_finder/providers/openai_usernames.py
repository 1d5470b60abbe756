"""
OpenAI-powered username suggestion provider.

This module implements the SuggestionProvider protocol using a chat
completion with a JSON-schema response format, so the model returns
`{"usernames": [...]}` which is then re-validated locally.
"""

from __future__ import annotations

import logging
from typing import Any, List

from openai import OpenAI, OpenAIError
from shared.observability.privacy import hash_payload
from shared.provider_settings import ProviderSettings

from username_finder.suggestion_provider import (
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    GenerationError,
    _log_suggestion_metrics,
    filter_usernames,
    parse_usernames_payload,
)

logger = logging.getLogger(__name__)

# JSON schema for the structured response
USERNAMES_SCHEMA = {
    "type": "object",
    "properties": {
        "usernames": {
            "type": "array",
            "items": {
                "type": "string",
                "description": (
                    f"A suggested available username between {USERNAME_MIN_LENGTH} "
                    f"and {USERNAME_MAX_LENGTH} characters."
                ),
            },
        },
    },
    "required": ["usernames"],
    "additionalProperties": False,
}

RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {
        "name": "username_suggestions",
        "schema": USERNAMES_SCHEMA,
        "strict": True,
    },
}

SYSTEM_PROMPT = "You are an expert in creating catchy and available social media usernames."

USER_PROMPT_TEMPLATE = """Based on the keyword "{keyword}", generate {count} creative and available-sounding usernames.
The usernames must be between {min_length} and {max_length} characters long.
The usernames can contain letters, numbers, and underscores.
Return the result as a JSON object with a single key "usernames" which is an array of the suggested username strings.
Do not return any usernames that are generic or very likely to be taken, like 'test', 'user', 'admin'."""


def build_user_prompt(keyword: str, count: int) -> str:
    return USER_PROMPT_TEMPLATE.format(
        keyword=keyword,
        count=count,
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
    )


class OpenAIUsernameProvider:
    """
    ChatGPT-backed provider that suggests short usernames for a keyword.

    Each call makes exactly one request: the client is built without SDK
    retries and with the configured timeout. Every failure of that request is
    normalized into a GenerationError carrying the generic user-facing message.
    """

    name = "openai"

    def __init__(self, settings: ProviderSettings, client: Any | None = None):
        self._settings = settings
        self._model = settings.openai.model
        if client is not None:
            self._client = client
        elif settings.openai.api_key:
            self._client = OpenAI(
                api_key=settings.openai.api_key,
                base_url=settings.openai.api_base,
                timeout=settings.timeout_seconds,
                max_retries=0,
            )
        else:
            self._client = None

    def find_available_usernames(self, keyword: str) -> List[str]:
        keyword = keyword.strip()
        if not self._client:
            logger.error({"event": "openai_username_missing_api_key", "provider": self.name})
            raise GenerationError()

        user_prompt = build_user_prompt(keyword, self._settings.suggestion_count)
        logger.info(
            {
                "event": "openai_username_request",
                "provider": self.name,
                "model": self._model,
                "prompt_hash": hash_payload({"system": SYSTEM_PROMPT, "user": user_prompt}),
                "keyword_hash": hash_payload(keyword),
            }
        )

        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": user_prompt},
                ],
                response_format=RESPONSE_FORMAT,
                temperature=self._settings.temperature,
                top_p=self._settings.top_p,
                max_tokens=self._settings.max_output_tokens,
            )
        except OpenAIError as exc:
            logger.error(
                {
                    "event": "openai_username_error",
                    "provider": self.name,
                    "error_type": type(exc).__name__,
                    "error_message": str(exc),
                }
            )
            raise GenerationError() from exc

        raw_usernames = parse_usernames_payload(_response_text(response))
        usernames = filter_usernames(raw_usernames, strict_charset=self._settings.strict_charset)
        _log_suggestion_metrics(self.name, keyword, len(raw_usernames), usernames)
        return usernames


def _response_text(response: Any) -> str | None:
    choices = getattr(response, "choices", None)
    if not choices:
        logger.warning({"event": "openai_username_no_choices", "provider": OpenAIUsernameProvider.name})
        return None
    return choices[0].message.content
