"""
Password hashing and the single-identity credential store behind HTTP Basic auth.
Uses bcrypt directly; the plain password never outlives CredentialStore construction.
"""
from __future__ import annotations

import hmac

import bcrypt

from forumhub.core.config import Settings

# Bcrypt only looks at the first 72 bytes; newer releases reject longer input
BCRYPT_MAX_BYTES = 72


def _truncate_to_bytes(s: str, max_bytes: int = BCRYPT_MAX_BYTES) -> bytes:
    return s.encode("utf-8")[:max_bytes]


def hash_password(password: str, rounds: int = 12) -> str:
    if password is None:
        raise ValueError("password is required")
    hashed = bcrypt.hashpw(_truncate_to_bytes(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_truncate_to_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        return False


class CredentialStore:
    """Exactly one valid identity: a username and the bcrypt hash of its password."""

    def __init__(self, username: str, password_hash: str) -> None:
        if not username:
            raise ValueError("username is required")
        self.username = username
        self._password_hash = password_hash

    @classmethod
    def from_settings(cls, settings: Settings) -> CredentialStore:
        password_hash = settings.auth_password_hash or hash_password(
            settings.auth_password, rounds=settings.auth_bcrypt_rounds
        )
        return cls(settings.auth_username, password_hash)

    def authenticate(self, username: str, password: str) -> bool:
        # Always run the hash check so unknown users and wrong passwords cost the same.
        password_ok = verify_password(password, self._password_hash)
        username_ok = hmac.compare_digest(username.encode("utf-8"), self.username.encode("utf-8"))
        return username_ok and password_ok
