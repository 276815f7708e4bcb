from __future__ import annotations

from loguru import logger

from src.infrastructure.session.local_storage import LocalStorage

TOKEN_KEY = "token"


class SessionContext:
    """Owns the bearer token lifecycle.

    The token is read from storage on every call, so several clients or
    processes sharing one storage directory observe logins and logouts
    immediately.
    """

    def __init__(self, storage: LocalStorage) -> None:
        self.storage = storage

    def get_token(self) -> str | None:
        return self.storage.get_item(TOKEN_KEY)

    def save_token(self, token: str) -> None:
        if not self.storage.available:
            logger.debug("No client-side storage, token not persisted")
            return
        self.storage.set_item(TOKEN_KEY, token)
        logger.debug("Session token saved")

    def remove_token(self) -> None:
        if not self.storage.available or self.get_token() is None:
            return
        self.storage.remove_item(TOKEN_KEY)
        logger.debug("Session token removed")

    def is_authenticated(self) -> bool:
        return bool(self.get_token())
