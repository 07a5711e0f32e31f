"""Staff credential check and bearer session tokens."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from threading import Lock
from typing import Optional

from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class AuthenticationError(Exception):
    """Base authentication failure."""


class InvalidCredentialsError(AuthenticationError):
    """Raised when username or password does not match a staff account."""


class InvalidSessionError(AuthenticationError):
    """Raised when a bearer token does not belong to an active session."""


@dataclass(frozen=True)
class StaffSession:
    username: str
    role: str
    token: str


class AuthService:
    """Validates staff logins and the bearer tokens they are issued."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._accounts = {account.username: account for account in self._settings.staff_accounts}
        self._sessions: dict[str, StaffSession] = {}
        self._lock = Lock()

    @property
    def auth_enabled(self) -> bool:
        return bool(self._accounts)

    def login(self, username: str, password: str) -> StaffSession:
        account = self._accounts.get(username.strip())
        if account is None or not secrets.compare_digest(
            password.encode("utf-8"),
            account.password.encode("utf-8"),
        ):
            logger.warning("Login failed | username=%s", username)
            raise InvalidCredentialsError("Invalid credentials")
        session = StaffSession(
            username=account.username,
            role=account.role,
            token=secrets.token_urlsafe(32),
        )
        with self._lock:
            # one live session per staff member
            self._sessions = {
                token: existing
                for token, existing in self._sessions.items()
                if existing.username != session.username
            }
            self._sessions[session.token] = session
        logger.info("Logged in | username=%s | role=%s", session.username, session.role)
        return session

    def logout(self, bearer_token: str) -> None:
        with self._lock:
            session = self._sessions.pop(bearer_token, None)
        if session is None:
            raise InvalidSessionError("No active session for this token")
        logger.info("Logged out | username=%s", session.username)

    def validate_bearer_token(self, bearer_token: str) -> StaffSession:
        with self._lock:
            session = self._sessions.get(bearer_token)
        if session is None:
            raise InvalidSessionError("Invalid bearer token. Login first.")
        return session
