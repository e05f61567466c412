"""
Role-gated entry points for the account operations.

Outer layers build a Caller from whatever authenticated the request and call
these methods; the gate runs before any service code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from accounts.core.permissions import Caller, require_any_role
from accounts.db.models import User
from accounts.domain.roles import RoleName
from accounts.services.profile_service import ProfileService
from accounts.services.registration_service import RegistrationService

_MEMBER_ROLES = (RoleName.USER.value, RoleName.ADMIN.value)
_ADMIN_ROLES = (RoleName.ADMIN.value,)


@dataclass
class AccountService:
    registration: RegistrationService
    profiles: ProfileService

    def list_users(self, caller: Caller) -> list[User]:
        require_any_role(caller, *_MEMBER_ROLES)
        return self.profiles.list_users()

    def get_self(self, caller: Caller) -> User:
        require_any_role(caller, *_MEMBER_ROLES)
        return self.profiles.get_self(caller.username)

    def register(
        self,
        caller: Optional[Caller],
        username: str,
        email: str,
        password: str,
        role_names: Optional[Iterable[str]] = None,
    ) -> User:
        # registration is open; the caller is accepted for symmetry only
        return self.registration.register(username, email, password, role_names)

    def update_user(self, caller: Caller, user_id: int, patch: Mapping[str, Any]) -> User:
        require_any_role(caller, *_MEMBER_ROLES)
        return self.profiles.update(user_id, patch)

    def delete_user(self, caller: Caller, user_id: int) -> None:
        require_any_role(caller, *_ADMIN_ROLES)
        self.profiles.delete(user_id)
