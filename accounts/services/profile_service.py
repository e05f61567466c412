"""Reads, edits and deletion of existing accounts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Mapping

from accounts.core.security import hash_password
from accounts.db.models import User
from accounts.domain.errors import (
    EmailTakenError,
    InvalidPatchError,
    UserNotFoundError,
    UsernameTakenError,
)
from accounts.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)

IDENTITY_FIELD = "id"
PATCHABLE_FIELDS = frozenset({"username", "email", "password", "created_at"})


@dataclass
class ProfileService:
    repository: SQLRepository
    hasher: Callable[[str], str] = field(default=hash_password)

    def list_users(self) -> list[User]:
        return self.repository.list_users()

    def get_user(self, user_id: int) -> User:
        user = self.repository.get_user(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    def get_self(self, username: str) -> User:
        user = self.repository.get_user_by_username(username)
        if user is None:
            raise UserNotFoundError(f"User '{username}' not found")
        return user

    def update(self, user_id: int, patch: Mapping[str, Any]) -> User:
        """Copy the patch onto the stored user, keeping its id.

        Username and email changes are checked for uniqueness again; role
        changes are not accepted here.
        """
        user = self.get_user(user_id)
        changes = {key: value for key, value in (patch or {}).items() if key != IDENTITY_FIELD}
        unknown = set(changes) - PATCHABLE_FIELDS
        if unknown:
            raise InvalidPatchError(f"Cannot update field(s): {', '.join(sorted(unknown))}")

        if "username" in changes:
            username = changes["username"]
            if not isinstance(username, str) or not username.strip():
                raise InvalidPatchError("Username must be a non-empty string")
            if username != user.username and self.repository.exists_by_username(username):
                raise UsernameTakenError()
            user.username = username
        if "email" in changes:
            email = changes["email"]
            if not isinstance(email, str) or not email.strip():
                raise InvalidPatchError("Email must be a non-empty string")
            if email != user.email and self.repository.exists_by_email(email):
                raise EmailTakenError()
            user.email = email
        if "password" in changes:
            if not isinstance(changes["password"], str) or not changes["password"]:
                raise InvalidPatchError("Password must be a non-empty string")
            user.password_hash = self.hasher(changes["password"])
        if "created_at" in changes:
            if not isinstance(changes["created_at"], datetime):
                raise InvalidPatchError("created_at must be a datetime")
            user.created_at = changes["created_at"]

        saved = self.repository.update_user(user)
        logger.info("User updated", extra={"user_id": saved.id, "fields": sorted(changes)})
        return saved

    def delete(self, user_id: int) -> None:
        if not self.repository.delete_user(user_id):
            raise UserNotFoundError(f"User {user_id} not found")
        logger.info("User deleted", extra={"user_id": user_id})
