import logging

from src.application.ports import ResetLinkSenderPort


logger = logging.getLogger(__name__)


class LoggingResetLinkSender(ResetLinkSenderPort):
    """Stand-in for email delivery during local development: writes the link to the DEBUG log."""

    def send_reset_link(self, email: str, reset_link: str) -> None:
        logger.debug("Password reset link for %s: %s", email, reset_link)
