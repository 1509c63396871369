"""Single-use password reset tokens with expiry."""
import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from src.domain.models import ResetToken


logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)


class ResetTokenStore:
    """
    Keyed token store owned by whoever constructs it.

    Args:
        ttl: How long an issued token stays valid
        clock: Returns the current time; override in tests
    """

    def __init__(
        self,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.ttl = ttl
        self.clock = clock
        self._tokens: Dict[str, ResetToken] = {}

    def __len__(self) -> int:
        return len(self._tokens)

    def issue(self, email: str) -> ResetToken:
        self.purge_expired()
        record = ResetToken(
            email=email.strip().lower(),
            token=secrets.token_urlsafe(32),
            expires_at=self.clock() + self.ttl,
        )
        self._tokens[record.token] = record
        return record

    def get(self, token: str) -> Optional[ResetToken]:
        return self._tokens.get(token)

    def is_expired(self, record: ResetToken) -> bool:
        return record.is_expired(self.clock())

    def mark_used(self, token: str) -> None:
        record = self._tokens.get(token)
        if record is not None:
            record.used = True

    def discard(self, token: str) -> None:
        self._tokens.pop(token, None)

    def purge_expired(self) -> int:
        now = self.clock()
        expired = [t for t, record in self._tokens.items() if record.is_expired(now)]
        for token in expired:
            del self._tokens[token]
        if expired:
            logger.info("Purged %d expired reset tokens", len(expired))
        return len(expired)
