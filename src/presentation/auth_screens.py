"""Forgot-password and reset-password screens."""
import streamlit as st

from src.application.password_reset import PasswordResetService


def show_forgot_password_screen(service: PasswordResetService) -> bool:
    """
    Display the reset request form.

    Returns:
        True if a reset request was accepted, False otherwise
    """
    st.markdown("# 🔑 Forgot Password")
    st.markdown("Enter your account email and we will send you a reset link.")

    with st.form("forgot_password_form"):
        email = st.text_input("Email", placeholder="your.email@example.com")
        submit = st.form_submit_button("Send reset link", use_container_width=True)

    if not submit:
        return False

    result = service.request_reset(email)
    if not result.success:
        st.error(f"❌ {result.message}")
        return False

    st.success(f"✅ {result.message}")
    return True


def show_reset_password_screen(service: PasswordResetService, token: str) -> bool:
    """
    Display the new-password form for a reset token.

    Returns:
        True if the password was changed, False otherwise
    """
    st.markdown("# 🔐 Reset Password")

    token_valid, token_message = service.verify(token)
    if not token_valid:
        st.error(f"❌ {token_message}")
        return False

    with st.form("reset_password_form"):
        new_password = st.text_input("New Password", type="password")
        confirm_password = st.text_input("Confirm Password", type="password")
        st.caption("Password must be at least 6 characters long.")
        submit = st.form_submit_button("Reset password", use_container_width=True)

    if not submit:
        return False

    success, message = service.reset_password(token, new_password, confirm_password)
    if success:
        st.success(f"✅ {message}")
        return True

    st.error(f"❌ {message}")
    return False
