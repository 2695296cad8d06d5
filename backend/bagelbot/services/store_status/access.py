"""Credential checks guarding the store status endpoints."""

import hmac
from typing import Protocol

from bagelbot.services.exceptions import UnauthorizedError


class InvalidStoreKey(UnauthorizedError):
    """Missing or wrong store status key."""

    def __init__(self) -> None:
        super().__init__("Invalid or missing API key")


class CredentialCheck(Protocol):
    """Decides whether a presented credential grants access."""

    def __call__(self, presented: str | None) -> bool: ...


class SharedSecretCheck:
    """Static shared-secret comparison (constant time)."""

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("Shared secret must not be empty")
        self._secret = secret.encode("utf-8")

    def __call__(self, presented: str | None) -> bool:
        if not presented:
            return False
        return hmac.compare_digest(self._secret, presented.encode("utf-8"))
