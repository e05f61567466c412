"""
Registration of new accounts.

Registration reconciles the requested role names against the role catalog,
rejects duplicate usernames and emails, and stores the new user with its
hashed credential and role set in one insert.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from accounts.core.security import hash_password
from accounts.db.models import Role, User
from accounts.domain.errors import EmailTakenError, RegistrationError, RoleNotFoundError, UsernameTakenError
from accounts.domain.roles import DEFAULT_ROLE, RoleCatalog, resolve_role_name
from accounts.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RegistrationService:
    """Creates accounts; the only writer of a user's initial role set."""

    repository: SQLRepository
    catalog: RoleCatalog
    hasher: Callable[[str], str] = field(default=hash_password)
    clock: Callable[[], datetime] = field(default=_utcnow)

    # -------------------------------------- roles --------------------------------------
    def resolve_roles(self, role_names: Optional[Iterable[str]] = None) -> set[Role]:
        """Turn requested role strings into catalog roles, one per distinct role."""
        if isinstance(role_names, str):
            role_names = [role_names]
        requested = set(role_names or ())
        if requested:
            wanted = {resolve_role_name(name) for name in requested}
        else:
            wanted = {DEFAULT_ROLE}
        return {self.catalog.require(name) for name in wanted}

    # -------------------------------------- register --------------------------------------
    def register(
        self,
        username: str,
        email: str,
        password: str,
        role_names: Optional[Iterable[str]] = None,
    ) -> User:
        # values are stored and matched exactly; whitespace-only counts as missing
        if not isinstance(username, str) or not username.strip():
            raise RegistrationError("Username is required")
        if not isinstance(email, str) or not email.strip():
            raise RegistrationError("Email is required")
        if not isinstance(password, str) or not password:
            raise RegistrationError("Password is required")

        if self.repository.exists_by_username(username):
            logger.warning("Registration rejected: username taken", extra={"username": username})
            raise UsernameTakenError()
        if self.repository.exists_by_email(email):
            logger.warning("Registration rejected: email in use", extra={"username": username})
            raise EmailTakenError()

        try:
            roles = self.resolve_roles(role_names)
        except RoleNotFoundError as exc:
            logger.error("Role catalog is missing a required role", extra={"role": exc.role_name, "username": username})
            raise
        user = User(
            username=username,
            email=email,
            password_hash=self.hasher(password),
            created_at=self.clock(),
            roles=roles,
        )
        try:
            saved = self.repository.insert_user(user)
        except (UsernameTakenError, EmailTakenError) as exc:
            logger.warning("Registration lost insert race", extra={"username": username, "reason": exc.message})
            raise
        logger.info(
            "User registered",
            extra={"user_id": saved.id, "username": saved.username, "roles": sorted(saved.role_names)},
        )
        return saved
