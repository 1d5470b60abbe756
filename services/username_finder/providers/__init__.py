"""Provider implementation backing username suggestion generation."""

from .openai_usernames import OpenAIUsernameProvider

__all__ = ["OpenAIUsernameProvider"]
