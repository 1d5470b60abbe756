"""Page-level tests driving the Streamlit script with a fake provider."""

from __future__ import annotations

from pathlib import Path

from conftest import FakeClock, FakeProvider, RecordingClipboard
from streamlit.testing.v1 import AppTest
from username_finder.copy_state import COPY_RESET_SECONDS, CopyTracker
from username_finder.search_controller import SearchController
from username_finder.search_state import Error, Idle, Success
from username_finder.suggestion_provider import GENERATION_ERROR_MESSAGE
from username_finder.ui_text import UI_TEXTS

APP_PATH = Path(__file__).resolve().parents[1] / "services" / "ui-streamlit" / "app.py"
RUN_TIMEOUT = 30

TEXT = UI_TEXTS["en"]


def _app_with(
    provider: FakeProvider,
    controller: SearchController | None = None,
    tracker: CopyTracker | None = None,
) -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=RUN_TIMEOUT)
    at.session_state["search_controller"] = controller or SearchController(provider)
    if tracker is not None:
        at.session_state["copy_tracker"] = tracker
    at.run()
    return at


def _search(at: AppTest, keyword: str) -> AppTest:
    at.text_input[0].input(keyword)
    at.button[0].click()
    return at.run()


def test_idle_page_shows_prompt(fake_provider: FakeProvider) -> None:
    at = _app_with(fake_provider)

    assert not at.exception
    assert at.title[0].value == TEXT.title
    assert any(caption.value == TEXT.idle_prompt for caption in at.caption)
    assert not at.error


def test_blank_keyword_does_not_search(fake_provider: FakeProvider) -> None:
    at = _search(_app_with(fake_provider), "   ")

    assert at.session_state["search_controller"].state == Idle()
    assert fake_provider.keywords == []


def test_results_render_as_copyable_cards(fake_provider: FakeProvider) -> None:
    at = _search(_app_with(fake_provider), "game")

    assert not at.exception
    assert at.session_state["search_controller"].state == Success(keyword="game", items=("gamer1", "pro_gm"))
    markdown = [element.value for element in at.markdown]
    assert "`@gamer1`" in markdown
    assert "`@pro_gm`" in markdown
    assert at.button(key="copy_0_gamer1").label == TEXT.copy_label


def test_copy_button_marks_card_as_copied(fake_provider: FakeProvider) -> None:
    at = _search(_app_with(fake_provider), "game")

    at.button(key="copy_1_pro_gm").click()
    at.run()

    assert at.button(key="copy_1_pro_gm").label == f"✓ {TEXT.copied}"
    assert at.button(key="copy_0_gamer1").label == TEXT.copy_label


def test_empty_result_shows_no_suggestions_message() -> None:
    at = _search(_app_with(FakeProvider(results=[])), "game")

    assert [info.value for info in at.info] == [TEXT.no_suggestions]
    assert not at.error


def test_failure_shows_alert(failing_provider: FakeProvider) -> None:
    at = _search(_app_with(failing_provider), "game")

    assert at.session_state["search_controller"].state == Error(message=GENERATION_ERROR_MESSAGE)
    assert [alert.value for alert in at.error] == [GENERATION_ERROR_MESSAGE]


def test_loading_shows_progress_and_disables_submit(fake_provider: FakeProvider) -> None:
    controller = SearchController(fake_provider)
    controller.begin("game")

    at = _app_with(fake_provider, controller=controller)

    assert [info.value for info in at.info] == [TEXT.loading]
    assert at.button[0].disabled
    assert not at.error


def test_copied_label_reverts_after_reset_window(fake_provider: FakeProvider) -> None:
    clock = FakeClock()
    clipboard = RecordingClipboard()
    at = _search(_app_with(fake_provider, tracker=CopyTracker(clipboard, clock=clock)), "game")

    at.button(key="copy_0_gamer1").click()
    at.run()

    assert clipboard.writes == ["gamer1"]
    assert at.button(key="copy_0_gamer1").label == f"✓ {TEXT.copied}"

    clock.advance(COPY_RESET_SECONDS)
    at.run()

    assert at.button(key="copy_0_gamer1").label == TEXT.copy_label
