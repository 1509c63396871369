import os
import logging

try:
    import streamlit as st  # type: ignore
    _HAS_STREAMLIT = True
except Exception:
    _HAS_STREAMLIT = False

logger = logging.getLogger(__name__)


def get_secret(name: str, default: str | None = None) -> str | None:
    # Prefer Streamlit secrets if available
    if _HAS_STREAMLIT:
        try:
            if name in st.secrets:
                return str(st.secrets.get(name))
        except Exception:
            logger.debug("Streamlit secrets unavailable; reading %s from environment", name)
    return os.environ.get(name, default)


class Settings:
    @property
    def diagnosis_delay_seconds(self) -> float:
        raw = get_secret("DIAGNOSIS_DELAY_SECONDS", "0") or "0"
        try:
            delay = float(raw)
        except ValueError:
            logger.warning("Invalid DIAGNOSIS_DELAY_SECONDS %r; using 0", raw)
            return 0.0
        return max(delay, 0.0)

    @property
    def reset_token_ttl_hours(self) -> int:
        raw = get_secret("RESET_TOKEN_TTL_HOURS", "24") or "24"
        try:
            hours = int(raw)
        except ValueError:
            logger.warning("Invalid RESET_TOKEN_TTL_HOURS %r; using 24", raw)
            return 24
        return hours if hours > 0 else 24

    @property
    def app_url(self) -> str:
        return get_secret("APP_URL", "http://localhost:8501") or "http://localhost:8501"

    @property
    def credentials_path(self) -> str:
        return get_secret("CREDENTIALS_FILE", ".streamlit/users.json") or ".streamlit/users.json"
