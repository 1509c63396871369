from typing import Optional, Protocol

from src.domain.models import ResetToken


class CredentialStorePort(Protocol):
    def has_account(self, email: str) -> bool:
        ...

    def set_password(self, email: str, password: str) -> bool:
        ...


class ResetTokenStorePort(Protocol):
    def issue(self, email: str) -> ResetToken:
        """
        Create and remember a fresh single-use token for the given email.
        """
        ...

    def get(self, token: str) -> Optional[ResetToken]:
        ...

    def mark_used(self, token: str) -> None:
        ...

    def discard(self, token: str) -> None:
        ...

    def is_expired(self, record: ResetToken) -> bool:
        ...


class ResetLinkSenderPort(Protocol):
    def send_reset_link(self, email: str, reset_link: str) -> None:
        """
        Deliver a reset link to the account owner only, never to the requester.
        """
        ...
