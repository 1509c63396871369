"""Account credentials with bcrypt password hashing."""
import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

import bcrypt


logger = logging.getLogger(__name__)


class InMemoryCredentialStore:
    """Holds hashed passwords keyed by normalized email."""

    def __init__(self, accounts: Optional[Dict[str, Dict[str, Any]]] = None):
        self._accounts: Dict[str, Dict[str, Any]] = accounts if accounts is not None else {}

    @staticmethod
    def _normalize(email: str) -> str:
        return email.strip().lower()

    def _hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def register(self, email: str, password: str) -> bool:
        """
        Add an account.

        Args:
            email: Account email address
            password: Plain text password (will be hashed)

        Returns:
            False if the email is already registered
        """
        email = self._normalize(email)
        if email in self._accounts:
            return False

        self._accounts[email] = {
            "password": self._hash_password(password),
            "created_at": datetime.now().isoformat(),
            "password_reset_at": None,
        }
        return True

    def has_account(self, email: str) -> bool:
        return self._normalize(email) in self._accounts

    def set_password(self, email: str, password: str) -> bool:
        email = self._normalize(email)
        account = self._accounts.get(email)
        if account is None:
            logger.warning("Password update for unknown account %s", email)
            return False

        account["password"] = self._hash_password(password)
        account["password_reset_at"] = datetime.now().isoformat()
        return True

    def check_password(self, email: str, password: str) -> bool:
        account = self._accounts.get(self._normalize(email))
        if account is None:
            return False
        try:
            return bcrypt.checkpw(
                password.encode('utf-8'),
                account["password"].encode('utf-8')
            )
        except ValueError:
            return False


class JsonFileCredentialStore(InMemoryCredentialStore):
    """Credential store seeded from, and written back to, a users JSON file."""

    def __init__(self, storage_path: str):
        self.storage_path = storage_path
        super().__init__(self._load_accounts())

    def _load_accounts(self) -> Dict[str, Dict[str, Any]]:
        if not os.path.exists(self.storage_path) or os.path.getsize(self.storage_path) == 0:
            logger.warning("No credentials file at %s; starting with no accounts", self.storage_path)
            return {}
        try:
            with open(self.storage_path, 'r') as f:
                accounts = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Unreadable credentials file %s: %s", self.storage_path, e)
            return {}
        return {self._normalize(email): record for email, record in accounts.items()}

    def _save_accounts(self) -> None:
        storage_dir = os.path.dirname(self.storage_path)
        if storage_dir:
            os.makedirs(storage_dir, exist_ok=True)
        with open(self.storage_path, 'w') as f:
            json.dump(self._accounts, f, indent=2)

    def register(self, email: str, password: str) -> bool:
        if not super().register(email, password):
            return False
        self._save_accounts()
        return True

    def set_password(self, email: str, password: str) -> bool:
        if not super().set_password(email, password):
            return False
        self._save_accounts()
        return True
