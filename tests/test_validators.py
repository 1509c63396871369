"""Unit tests for reset-flow validators."""
from src.infrastructure.auth.validators import (
    passwords_match,
    validate_email,
    validate_new_password,
)


class TestValidateEmail:
    """Test email validation."""

    def test_valid_emails(self):
        for email in ["user@example.com", "test+user@example.co.uk", "a@b.co", " padded@example.com "]:
            is_valid, error = validate_email(email)
            assert is_valid, f"Email '{email}' should be valid but got error: {error}"
            assert error == ""

    def test_invalid_email_format(self):
        for email in ["notanemail", "user@", "@example.com", "user@example", "user name@example.com"]:
            is_valid, error = validate_email(email)
            assert not is_valid, f"Email '{email}' should be invalid"
            assert error == "Please enter a valid email address"

    def test_empty_email(self):
        assert validate_email("") == (False, "Email address is required")
        assert validate_email("   ") == (False, "Email address is required")


class TestValidateNewPassword:
    """Test replacement password rules."""

    def test_valid(self):
        assert validate_new_password("abcdef") == (True, "")

    def test_too_short(self):
        assert validate_new_password("abcde") == (False, "Password must be at least 6 characters long")

    def test_empty(self):
        assert validate_new_password("") == (False, "Password is required")

    def test_too_long_for_bcrypt(self):
        is_valid, error = validate_new_password("x" * 73)
        assert not is_valid
        assert "too long" in error


def test_passwords_match():
    assert passwords_match("abcdef", "abcdef") == (True, "")
    assert passwords_match("abcdef", "abcdeg") == (False, "Passwords do not match")
