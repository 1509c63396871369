import logging
import os
from datetime import timedelta
from typing import List

import streamlit as st

from src.application.password_reset import PasswordResetService
from src.application.use_cases import DiagnosisRequestHandler
from src.infrastructure.auth.credential_store import JsonFileCredentialStore
from src.infrastructure.auth.link_sender import LoggingResetLinkSender
from src.infrastructure.auth.reset_tokens import ResetTokenStore
from src.infrastructure.config import Settings
from src.presentation.auth_screens import (
    show_forgot_password_screen,
    show_reset_password_screen,
)


logger = logging.getLogger(__name__)


DISCLAIMER = (
    "⚕️ **DISCLAIMER:** This is NOT medical advice and NOT a diagnosis. "
    "This symptom checker is for educational purposes only. "
    "If you experience emergency symptoms, seek immediate care (call local emergency number)."
)

SEVERITY_ICONS = {"mild": "🟢", "moderate": "🟡", "severe": "🔴"}


@st.cache_resource
def get_reset_service() -> PasswordResetService:
    settings = Settings()
    tokens = ResetTokenStore(ttl=timedelta(hours=settings.reset_token_ttl_hours))
    credentials = JsonFileCredentialStore(settings.credentials_path)
    return PasswordResetService(credentials, tokens, LoggingResetLinkSender(), settings=settings)


def parse_symptom_lines(raw: str) -> List[str]:
    return [line.strip() for line in raw.splitlines() if line.strip()]


def format_diagnosis_markdown(payload: dict) -> str:
    """Render a diagnosis payload (as returned by the request handler) as markdown."""
    lines = ["# 📋 Assessment Summary\n"]

    if payload["seekImmediateCare"]:
        lines.append("## ⚠️ EMERGENCY")
        lines.append("**Seek immediate medical care by calling your local emergency number.**\n")

    icon = SEVERITY_ICONS.get(payload["severity"], "🔵")
    lines.append(f"## {icon} {payload['condition']}")
    lines.append(f"**Confidence:** {payload['confidence']}%")
    lines.append(f"**Severity:** {payload['severity'].title()}\n")
    lines.append(payload["explanation"])
    lines.append("")

    lines.append("## 📝 Recommendations")
    for i, step in enumerate(payload["recommendations"], 1):
        lines.append(f"{i}. {step}")
    lines.append("")

    lines.append("---")
    lines.append("⚠️ **Reminder:** This is NOT medical advice. Always consult a licensed healthcare professional.")

    return "\n".join(lines)


def _render_checker(settings: Settings):
    st.markdown("# 🏥 Symptom Checker")
    st.info(DISCLAIMER)

    raw = st.text_area(
        "Describe your symptoms, one per line",
        placeholder="severe headache for 2 weeks\nnausea",
        height=160,
    )

    if st.button("🔬 Analyze symptoms", use_container_width=True):
        symptoms = parse_symptom_lines(raw)
        handler = DiagnosisRequestHandler(settings=settings)
        with st.spinner("🔬 Analyzing your symptoms..."):
            status, payload = handler.handle({"symptoms": symptoms})
        if status != 200:
            st.error("❌ **Error during analysis.** Please try again.")
        st.session_state.diagnosis_payload = payload

    payload = st.session_state.get("diagnosis_payload")
    if payload:
        st.markdown(format_diagnosis_markdown(payload))


def main():
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))

    st.set_page_config(
        page_title="Symptom Checker",
        page_icon="⚕️",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    settings = Settings()
    service = get_reset_service()

    reset_token = st.query_params.get("reset_token")
    if reset_token:
        show_reset_password_screen(service, reset_token)
        return

    page = st.sidebar.radio("Page", ["Symptom Checker", "Forgot Password"])
    if page == "Forgot Password":
        show_forgot_password_screen(service)
        return

    _render_checker(settings)


if __name__ == "__main__":
    main()
