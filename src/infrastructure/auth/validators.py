"""Input validation for the password reset flow."""
import re
from typing import Tuple


MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72

EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate email format.

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not email or not email.strip():
        return False, "Email address is required"

    if not re.match(EMAIL_PATTERN, email.strip()):
        return False, "Please enter a valid email address"

    return True, ""


def validate_new_password(password: str) -> Tuple[bool, str]:
    """
    Validate a replacement password.

    Args:
        password: New password to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not password:
        return False, "Password is required"

    if len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"

    # bcrypt refuses longer input
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False, f"Password is too long (max {MAX_PASSWORD_BYTES} bytes)"

    return True, ""


def passwords_match(password: str, confirm_password: str) -> Tuple[bool, str]:
    if password != confirm_password:
        return False, "Passwords do not match"

    return True, ""
