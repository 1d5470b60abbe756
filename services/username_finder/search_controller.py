"""
State machine behind the username search page.

The controller owns the single SearchState slot. A submission moves it to
Loading, and the provider's outcome moves it to Success or Error. Each request
is tagged with a sequence number; outcomes for anything but the latest
request are dropped, and new submissions are refused while one is in flight.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from shared.observability.privacy import hash_payload
from shared.observability.telemetry import bind_request_context, new_request_id, reset_request_context

from username_finder.search_state import Error, Idle, Loading, SearchState, Success
from username_finder.suggestion_provider import GenerationError, SuggestionProvider

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class SearchController:
    def __init__(self, provider: SuggestionProvider) -> None:
        self._provider = provider
        self._state: SearchState = Idle()
        self._sequence = 0
        self.keyword = ""

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def can_submit(self) -> bool:
        return not self.is_loading

    def begin(self, keyword: str) -> Optional[int]:
        """
        Enter Loading for `keyword` and return the request's sequence number.

        Returns None, leaving the state untouched, for blank keywords or while
        another request is still loading.
        """

        self.keyword = keyword
        trimmed = keyword.strip()
        if not trimmed:
            return None
        if not self.can_submit:
            logger.info({"event": "search_submit_refused", "reason": "loading", "sequence": self._sequence})
            return None

        self._sequence += 1
        self._state = Loading(keyword=trimmed)
        return self._sequence

    def resolve(self, sequence: int, items: Iterable[str]) -> bool:
        """Complete request `sequence` with results; stale outcomes are ignored."""

        if not self._is_current(sequence):
            return False
        self._state = Success(keyword=self._state.keyword, items=tuple(items))
        return True

    def fail(self, sequence: int, error: BaseException) -> bool:
        """Complete request `sequence` with an error; stale outcomes are ignored."""

        if not self._is_current(sequence):
            return False
        self._state = Error(message=str(error) or UNKNOWN_ERROR_MESSAGE)
        return True

    def submit(self, keyword: str) -> SearchState:
        """
        Run a whole search synchronously and return the resulting state.

        Any provider exception ends the search in Error, so the page cannot
        stay in Loading.
        """

        sequence = self.begin(keyword)
        if sequence is None:
            return self._state

        assert isinstance(self._state, Loading)
        trimmed = self._state.keyword
        token = bind_request_context(new_request_id())
        try:
            logger.info({"event": "search_started", "sequence": sequence, "keyword_hash": hash_payload(trimmed)})
            try:
                items = self._provider.find_available_usernames(trimmed)
            except GenerationError as exc:
                self.fail(sequence, exc)
            except Exception as exc:
                logger.exception({"event": "search_unexpected_error", "sequence": sequence})
                self.fail(sequence, exc)
            else:
                self.resolve(sequence, items)
            logger.info({"event": "search_finished", "sequence": sequence, "state": type(self._state).__name__})
        finally:
            reset_request_context(token)
        return self._state

    def _is_current(self, sequence: int) -> bool:
        if sequence != self._sequence or not isinstance(self._state, Loading):
            logger.info({"event": "search_outcome_discarded", "sequence": sequence, "latest": self._sequence})
            return False
        return True
