"""Streamlit UI for the code translator."""
import logging
from dataclasses import dataclass, replace
from typing import Optional

import requests
import streamlit as st

from config import Config
from models import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, LANGUAGES


logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Failed to translate code. Please try again."


@dataclass(frozen=True)
class FormState:
    """Snapshot of the form; every update event returns a new snapshot."""
    source_code: str = ""
    target_code: str = ""
    source_language: str = DEFAULT_SOURCE_LANGUAGE
    target_language: str = DEFAULT_TARGET_LANGUAGE

    def with_source_code(self, source_code: str) -> "FormState":
        return replace(self, source_code=source_code)

    def with_languages(self, source_language: str, target_language: str) -> "FormState":
        return replace(self, source_language=source_language, target_language=target_language)

    def with_target_code(self, target_code: str) -> "FormState":
        return replace(self, target_code=target_code)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    is_error: bool = False


@dataclass(frozen=True)
class SubmitOutcome:
    state: FormState
    notification: Notification

    @property
    def ok(self) -> bool:
        return not self.notification.is_error


class GatewayError(Exception):
    """Translation failed; the message is shown to the user as-is."""


class GatewayClient:
    """Calls the translation gateway over HTTP."""

    def __init__(self, base_url: str, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def health(self) -> bool:
        """Check if API is running."""
        try:
            response = requests.get(f"{self.base_url}/health", timeout=2)
            return response.status_code == 200
        except requests.RequestException:
            return False

    def translate(self, state: FormState) -> str:
        """Send one translation request and return the translated code."""
        try:
            response = requests.post(
                f"{self.base_url}/translate-code",
                json={
                    "sourceCode": state.source_code,
                    "sourceLanguage": state.source_language,
                    "targetLanguage": state.target_language,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Gateway request failed: %s", e)
            raise GatewayError(FALLBACK_ERROR) from e

        try:
            data = response.json()
        except ValueError as e:
            raise GatewayError(FALLBACK_ERROR) from e

        if response.ok and isinstance(data, dict) and "translatedCode" in data:
            return data["translatedCode"]

        message = data.get("error") if isinstance(data, dict) else None
        raise GatewayError(message or FALLBACK_ERROR)


def submit(state: FormState, client: GatewayClient) -> SubmitOutcome:
    """
    Run one translation for the current form.

    Blank source code never reaches the gateway. Any previous target code is
    cleared before the call.
    """
    if not state.source_code.strip():
        return SubmitOutcome(
            state=state,
            notification=Notification(
                "No code provided", "Please enter some code to translate.", is_error=True
            ),
        )

    state = state.with_target_code("")
    try:
        translated = client.translate(state)
    except GatewayError as e:
        return SubmitOutcome(
            state=state,
            notification=Notification("Translation failed", str(e) or FALLBACK_ERROR, is_error=True),
        )

    return SubmitOutcome(
        state=state.with_target_code(translated),
        notification=Notification(
            "Translation complete!",
            f"Successfully translated from {state.source_language} to {state.target_language}",
        ),
    )


def notify(notification: Notification):
    """Show a toast, and an inline error for failures."""
    st.toast(f"**{notification.title}** {notification.description}")
    if notification.is_error:
        st.error(f"{notification.title}: {notification.description}")


def _start_translation():
    # Widget values are committed before callbacks run
    st.session_state.form = st.session_state.form.with_source_code(st.session_state.source_code)
    st.session_state.in_flight = True


def main():
    st.set_page_config(
        page_title="CodeTranslate",
        page_icon="💻",
        layout="wide"
    )

    st.title("💻 CodeTranslate")
    st.markdown("**AI-powered code language converter**")

    config = Config.from_env()
    client = GatewayClient(config.api_base_url, timeout=config.request_timeout)

    if not client.health():
        st.error("⚠️ API server is not running. Please start the API server first:")
        st.code("python start_api.py", language="bash")
        st.stop()

    if "form" not in st.session_state:
        initial = FormState()
        st.session_state.form = initial
        st.session_state.source_language = initial.source_language
        st.session_state.target_language = initial.target_language
        st.session_state.source_code = initial.source_code
    if "in_flight" not in st.session_state:
        st.session_state.in_flight = False

    form: FormState = st.session_state.form

    # Language selectors
    source_col, target_col = st.columns(2)
    with source_col:
        source_language = st.selectbox(
            "Source Language",
            LANGUAGES,
            key="source_language",
        )
    with target_col:
        target_language = st.selectbox(
            "Target Language",
            LANGUAGES,
            key="target_language",
        )
    form = form.with_languages(source_language, target_language)

    # Code panels
    source_panel, target_panel = st.columns(2)
    with source_panel:
        st.subheader("Source Code")
        source_code = st.text_area(
            "Source Code",
            key="source_code",
            height=400,
            placeholder="Paste your code or a description here...",
            label_visibility="collapsed",
        )
        form = form.with_source_code(source_code)
        if form.source_code:
            with st.expander("Copy source"):
                st.code(form.source_code)

    st.session_state.form = form

    st.button(
        "🚀 Translate Code",
        type="primary",
        disabled=st.session_state.in_flight,
        on_click=_start_translation,
    )

    if st.session_state.in_flight:
        with st.spinner("Translating..."):
            outcome = submit(form, client)
        st.session_state.form = outcome.state
        st.session_state.in_flight = False
        st.session_state.last_notification = outcome.notification
        st.rerun()

    notification = st.session_state.pop("last_notification", None)
    if notification is not None:
        notify(notification)

    with target_panel:
        st.subheader("Translated Code")
        if st.session_state.form.target_code:
            # st.code renders a copy-to-clipboard button
            st.code(st.session_state.form.target_code)
        else:
            st.caption("Translated code will appear here...")


if __name__ == "__main__":
    main()
