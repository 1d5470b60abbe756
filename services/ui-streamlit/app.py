import json
import logging
from dataclasses import replace
from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

from shared.observability.telemetry import configure_logging
from shared.provider_settings import ProviderSettings, ProviderSettingsError, load_provider_settings
from username_finder.copy_state import COPY_RESET_SECONDS, CopyState, CopyTracker
from username_finder.providers.openai_usernames import OpenAIUsernameProvider
from username_finder.search_controller import SearchController
from username_finder.search_state import Error, Idle, Loading, SearchState, Success
from username_finder.ui_text import UIText, load_ui_text

configure_logging("username-finder-ui")
logger = logging.getLogger(__name__)

_SECRET_API_KEY_KEYS = ("openai_api_key", "OPENAI_API_KEY")
GRID_COLUMNS = 3
COPY_REFRESH_SECONDS = COPY_RESET_SECONDS / 4
_PENDING_CLIPBOARD_KEY = "pending_clipboard_text"

_CLIPBOARD_SCRIPT = """
<script>
const text = {payload};
function fallbackCopy() {{
  const area = document.createElement("textarea");
  area.value = text;
  document.body.appendChild(area);
  area.select();
  document.execCommand("copy");
  document.body.removeChild(area);
}}
const clipboard = (window.parent && window.parent.navigator.clipboard) || navigator.clipboard;
if (clipboard) {{
  clipboard.writeText(text).catch(fallbackCopy);
}} else {{
  fallbackCopy();
}}
</script>
"""

_RTL_STYLE = """
<style>
.stApp, .stTextInput input {direction: rtl; text-align: right;}
</style>
"""


class BrowserClipboard:
    """
    Clipboard that writes from the user's browser.

    Copy buttons fire during Streamlit callbacks, before the page is rendered,
    so the text is parked in session state and flushed by `render_pending_copy`
    inside the suggestion grid.
    """

    def write_text(self, text: str) -> None:
        st.session_state[_PENDING_CLIPBOARD_KEY] = text


def render_pending_copy() -> None:
    text = st.session_state.pop(_PENDING_CLIPBOARD_KEY, None)
    if text is None:
        return
    components.html(clipboard_script(text), height=0)


def clipboard_script(text: str) -> str:
    # "</" must not appear inside the inline script.
    payload = json.dumps(text).replace("</", "<\\/")
    return _CLIPBOARD_SCRIPT.format(payload=payload)


def _secret_api_key() -> Optional[str]:
    try:
        for key in _SECRET_API_KEY_KEYS:
            value = st.secrets.get(key)
            if value:
                return str(value).strip()
    except (FileNotFoundError, KeyError):
        return None
    return None


def _load_settings() -> ProviderSettings:
    try:
        settings = load_provider_settings()
    except ProviderSettingsError as exc:
        logger.error("Failed to load username provider settings: %s", exc)
        raise

    if settings.openai.api_key:
        return settings
    secret_key = _secret_api_key()
    if secret_key:
        return replace(settings, openai=replace(settings.openai, api_key=secret_key))
    return settings


@st.cache_resource
def get_provider() -> OpenAIUsernameProvider:
    return OpenAIUsernameProvider(settings=_load_settings())


def init_session_state() -> None:
    if "search_controller" not in st.session_state:
        st.session_state["search_controller"] = SearchController(get_provider())
    if "copy_tracker" not in st.session_state:
        st.session_state["copy_tracker"] = CopyTracker(BrowserClipboard())


def render_search_form(controller: SearchController, text: UIText) -> None:
    with st.form("search_form"):
        keyword = st.text_input(
            text.input_label,
            key="keyword_input",
            placeholder=text.input_placeholder,
            label_visibility="collapsed",
        )
        submitted = st.form_submit_button(
            text.submit_label,
            disabled=not controller.can_submit,
        )

    if submitted:
        with st.spinner(text.loading):
            controller.submit(keyword)
        if isinstance(controller.state, Success):
            st.session_state["copy_tracker"].clear()


@st.fragment(run_every=COPY_REFRESH_SECONDS)
def render_suggestion_grid(items, tracker: CopyTracker, text: UIText) -> None:
    """Card grid, rerun on a timer so copied labels revert without user input."""
    st.subheader(text.results_heading)
    columns = st.columns(GRID_COLUMNS)
    for index, username in enumerate(items):
        column = columns[index % GRID_COLUMNS]
        with column.container(border=True):
            st.markdown(f"`@{username}`")
            copied = tracker.state_of(username) is CopyState.JUST_COPIED
            st.button(
                f"✓ {text.copied}" if copied else text.copy_label,
                key=f"copy_{index}_{username}",
                on_click=tracker.copy,
                args=(username,),
                help=f"{text.copy_label} @{username}",
            )
    render_pending_copy()


def render_content(state: SearchState, tracker: CopyTracker, text: UIText) -> None:
    if isinstance(state, Loading):
        st.info(text.loading)
    elif isinstance(state, Success):
        if state.is_empty:
            st.info(text.no_suggestions)
        else:
            render_suggestion_grid(state.items, tracker, text)
    elif isinstance(state, Error):
        st.error(state.message)
    elif isinstance(state, Idle):
        st.caption(text.idle_prompt)


def main() -> None:
    text = load_ui_text()
    st.set_page_config(page_title=text.title, page_icon="🔎")
    if text.right_to_left:
        st.markdown(_RTL_STYLE, unsafe_allow_html=True)

    init_session_state()
    controller: SearchController = st.session_state["search_controller"]
    tracker: CopyTracker = st.session_state["copy_tracker"]

    st.title(text.title)
    st.caption(text.subtitle)

    render_search_form(controller, text)
    render_content(controller.state, tracker, text)


if __name__ == "__main__":
    main()
