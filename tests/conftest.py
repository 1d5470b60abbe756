"""Pytest configuration for the Username Finder tests.

Adds the services directory and the Streamlit page directory to sys.path so
tests run from a plain checkout as well as from an editable install.
"""

import sys
from pathlib import Path
from typing import List

import pytest

SERVICES_ROOT = Path(__file__).resolve().parents[1] / "services"
UI_ROOT = SERVICES_ROOT / "ui-streamlit"

for path in (SERVICES_ROOT, UI_ROOT):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from username_finder.suggestion_provider import GenerationError  # noqa: E402

_SETTINGS_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_API_BASE",
    "USERNAME_PROVIDER_TIMEOUT_SECONDS",
    "USERNAME_PROVIDER_TEMPERATURE",
    "USERNAME_PROVIDER_TOP_P",
    "USERNAME_PROVIDER_MAX_TOKENS",
    "USERNAME_PROVIDER_SUGGESTION_COUNT",
    "USERNAME_PROVIDER_STRICT_CHARSET",
    "USERNAME_FINDER_LOCALE",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell configuration out of the tests."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class FakeProvider:
    """In-memory provider returning canned results or raising canned errors."""

    name = "fake"

    def __init__(self, results: List[str] | None = None, error: Exception | None = None):
        self.results = list(results or [])
        self.error = error
        self.keywords: List[str] = []

    def find_available_usernames(self, keyword: str) -> List[str]:
        self.keywords.append(keyword)
        if self.error is not None:
            raise self.error
        return list(self.results)


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(results=["gamer1", "pro_gm"])


@pytest.fixture
def failing_provider() -> FakeProvider:
    return FakeProvider(error=GenerationError())


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingClipboard:
    def __init__(self) -> None:
        self.writes: List[str] = []

    def write_text(self, text: str) -> None:
        self.writes.append(text)
