from __future__ import annotations

"""
Provider contract for username suggestion generation.

This module defines what the search controller expects from a suggestion
provider plus the local validation applied to whatever the generator returns.
The generator is asked for 3-7 character usernames but is never trusted to
honor that, so every result is re-filtered here before it reaches the UI.
"""

import json
import logging
import re
from typing import Any, Iterable, List, Protocol, runtime_checkable

from shared.observability.privacy import hash_payload

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 7
GENERATION_ERROR_MESSAGE = "Failed to get suggestions from AI. Please check your API key and try again."

_USERNAME_CHARSET = re.compile(r"^[A-Za-z0-9_]+$")


class GenerationError(RuntimeError):
    """Raised when the remote generation call cannot produce a usable result."""

    def __init__(self, message: str = GENERATION_ERROR_MESSAGE) -> None:
        super().__init__(message)


@runtime_checkable
class SuggestionProvider(Protocol):
    """
    Interface the search controller depends on.

    Implementations should provide a descriptive `name` attribute and a
    `find_available_usernames` method that returns validated suggestions or
    raises GenerationError.
    """

    name: str

    def find_available_usernames(self, keyword: str) -> List[str]:
        """Return candidate usernames for the keyword, possibly none."""
        ...


def filter_usernames(candidates: Iterable[Any], *, strict_charset: bool = False) -> List[str]:
    """
    Keep only string candidates whose length is within the allowed range.

    With `strict_charset` the letters/digits/underscore rule is enforced too.
    Order is preserved and the function is idempotent.
    """

    kept: List[str] = []
    for candidate in candidates:
        if not isinstance(candidate, str):
            continue
        if not USERNAME_MIN_LENGTH <= len(candidate) <= USERNAME_MAX_LENGTH:
            continue
        if strict_charset and not _USERNAME_CHARSET.match(candidate):
            continue
        kept.append(candidate)
    return kept


def parse_usernames_payload(raw_text: str | None) -> List[Any]:
    """
    Extract the raw `usernames` array from a generator response.

    Anything that is not a JSON object with an array `usernames` field yields
    an empty list rather than an error.
    """

    if not raw_text or not raw_text.strip():
        return []

    try:
        parsed = json.loads(raw_text.strip())
    except (json.JSONDecodeError, RecursionError) as exc:
        logger.warning(
            {
                "event": "username_payload_parse_error",
                "error_message": str(exc),
                "payload_hash": hash_payload(raw_text),
            }
        )
        return []

    if not isinstance(parsed, dict):
        logger.warning({"event": "username_payload_not_object", "payload_hash": hash_payload(raw_text)})
        return []

    usernames = parsed.get("usernames")
    if not isinstance(usernames, list):
        logger.warning({"event": "username_payload_missing_usernames", "payload_hash": hash_payload(raw_text)})
        return []
    return usernames


def _log_suggestion_metrics(provider_name: str, keyword: str, raw_count: int, usernames: List[str]) -> None:
    logger.info(
        {
            "event": "username_provider_output",
            "provider": provider_name,
            "keyword_hash": hash_payload(keyword),
            "raw_count": raw_count,
            "suggestion_count": len(usernames),
            "dropped_count": raw_count - len(usernames),
            "suggestions_hash": hash_payload(usernames),
        }
    )
