"""Application service for user accounts and the storage port it relies on."""

from __future__ import annotations

from typing import Protocol

from userhex.domain import UserCredential, UserModel


class DBPort(Protocol):
    """Storage operations the application needs."""

    def insert(self, user: UserModel) -> bool:
        """Store a new user, filling in its id, version and creation time."""

    def update(self, user: UserModel) -> tuple[int, int]:
        """Update a user at its current version; return its id and new version."""

    def delete(self, user_id: int) -> bool:
        """Remove the user with ``user_id``."""

    def validate_credential(self, credential: UserCredential) -> tuple[int, bool]:
        """Check a credential; return the user id and whether it is valid."""


class Application:
    """Use cases for managing users, backed by a DBPort."""

    def __init__(self, db: DBPort) -> None:
        self._db = db

    def register_user(self, user: UserModel) -> bool:
        """Register a new user."""
        return self._db.insert(user)

    def update_user(self, user: UserModel) -> tuple[int, int]:
        """Update a user; return its id and new version."""
        user_id, version = self._db.update(user)
        return user_id, version

    def delete_user(self, user_id: int) -> bool:
        """Delete a user by id."""
        return self._db.delete(user_id)

    def validate_user(self, credential: UserCredential) -> tuple[int, bool]:
        """Validate a login credential; return the user id and validity."""
        user_id, valid = self._db.validate_credential(credential)
        return user_id, valid