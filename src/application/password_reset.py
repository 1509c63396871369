import logging
from typing import Optional, Tuple

from src.application.ports import CredentialStorePort, ResetLinkSenderPort, ResetTokenStorePort
from src.application.schemas import ResetRequestResult
from src.infrastructure.auth.validators import (
    passwords_match,
    validate_email,
    validate_new_password,
)
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)


RESET_REQUESTED_MESSAGE = (
    "If an account exists with this email, you will receive a password reset link shortly."
)


class PasswordResetService:
    """Forgot-password flow: request a token, verify it, then redeem it once."""

    def __init__(
        self,
        credentials: CredentialStorePort,
        tokens: ResetTokenStorePort,
        sender: ResetLinkSenderPort,
        settings: Optional[Settings] = None,
    ):
        self.credentials = credentials
        self.tokens = tokens
        self.sender = sender
        self.settings = settings or Settings()

    def request_reset(self, email: str) -> ResetRequestResult:
        is_valid, error = validate_email(email)
        if not is_valid:
            return ResetRequestResult(success=False, message=error)

        # Same answer either way so callers cannot tell which accounts exist
        if not self.credentials.has_account(email):
            logger.info("Password reset requested for unknown email")
            return ResetRequestResult(success=True, message=RESET_REQUESTED_MESSAGE)

        record = self.tokens.issue(email)
        reset_link = f"{self.settings.app_url.rstrip('/')}/?reset_token={record.token}"
        logger.info("Issued password reset token expiring at %s", record.expires_at.isoformat())
        self.sender.send_reset_link(record.email, reset_link)
        return ResetRequestResult(success=True, message=RESET_REQUESTED_MESSAGE)

    def _check_token(self, token: str) -> Tuple[bool, str]:
        record = self.tokens.get(token)
        if record is None:
            return False, "Invalid or expired reset token"
        if record.used:
            return False, "Reset token has already been used"
        if self.tokens.is_expired(record):
            self.tokens.discard(token)
            return False, "Reset token has expired"
        return True, ""

    def verify(self, token: Optional[str]) -> Tuple[bool, str]:
        if not token:
            return False, "Reset token is required"

        is_valid, error = self._check_token(token)
        if not is_valid:
            return False, error
        return True, "Reset token is valid"

    def reset_password(
        self,
        token: Optional[str],
        new_password: Optional[str],
        confirm_password: Optional[str],
    ) -> Tuple[bool, str]:
        """
        Replace the account password behind a valid token.

        Args:
            token: Token handed out by request_reset
            new_password: Replacement password
            confirm_password: Must equal new_password

        Returns:
            Tuple of (success, message)
        """
        if not token or not new_password or not confirm_password:
            return False, "All fields are required"

        matched, error = passwords_match(new_password, confirm_password)
        if not matched:
            return False, error

        is_valid, error = validate_new_password(new_password)
        if not is_valid:
            return False, error

        is_valid, error = self._check_token(token)
        if not is_valid:
            return False, error

        record = self.tokens.get(token)
        if not self.credentials.set_password(record.email, new_password):
            return False, "Failed to reset password"

        self.tokens.mark_used(token)
        logger.info("Password reset completed")
        return True, "Password has been successfully reset"
