"""
Username Finder suggests short social-media usernames for a keyword by asking
an OpenAI model and re-validating what it returns.
"""

from .copy_state import COPY_RESET_SECONDS, CopyState, CopyTracker
from .search_controller import SearchController
from .search_state import Error, Idle, Loading, SearchState, Success
from .suggestion_provider import (
    GENERATION_ERROR_MESSAGE,
    GenerationError,
    SuggestionProvider,
    filter_usernames,
)

__all__ = [
    "COPY_RESET_SECONDS",
    "CopyState",
    "CopyTracker",
    "SearchController",
    "Error",
    "Idle",
    "Loading",
    "SearchState",
    "Success",
    "GENERATION_ERROR_MESSAGE",
    "GenerationError",
    "SuggestionProvider",
    "filter_usernames",
]
