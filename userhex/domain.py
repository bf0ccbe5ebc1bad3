"""Core user entities and password hashing."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import bcrypt

DEFAULT_COST = 10
MAX_PASSWORD_BYTES = 72


class PasswordMismatchError(Exception):
    """Raised when a plaintext password does not match a stored hash."""


@dataclass
class Password:
    """A password held as its plaintext (once set) and its bcrypt hash."""

    plaintext: str | None = None
    hash: bytes = b""

    def set(self, plaintext: str) -> None:
        """Hash ``plaintext`` with bcrypt and keep both values."""
        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password length exceeds {MAX_PASSWORD_BYTES} bytes")
        self.hash = bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=DEFAULT_COST))
        self.plaintext = plaintext


@dataclass
class UserCredential:
    """An e-mail address and plaintext password supplied for login."""

    email: str = ""
    password: str = ""

    def compare(self, candidate: str, password_hash: bytes) -> bool:
        """Return True if ``candidate`` matches ``password_hash``.

        Raises PasswordMismatchError when it does not, and ValueError when
        the hash is malformed.
        """
        if bcrypt.checkpw(candidate.encode("utf-8"), bytes(password_hash)):
            return True
        raise PasswordMismatchError("hashed password does not match the given password")


@dataclass
class UserModel:
    """A stored user account."""

    id: int = 0
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: Password = field(default_factory=Password)
    version: int = 0
    activated: bool = False
    created_at: datetime | None = None