"""
Role names and the read-only role catalog.

The catalog is built once at startup from the role table and passed into the
services that need it. Registration only looks roles up; it never creates them.
"""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Iterable, Optional

from accounts.domain.errors import RoleNotFoundError

if TYPE_CHECKING:
    from accounts.db.models import Role
    from accounts.repositories.sql_repository import SQLRepository


class RoleName(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


DEFAULT_ROLE = RoleName.USER


def resolve_role_name(requested: str) -> RoleName:
    """Map a requested role string onto the catalog.

    Only the literal ``"admin"`` selects the administrative role. Every other
    string, unknown names included, falls back to the default role.
    """
    if requested == RoleName.ADMIN.value:
        return RoleName.ADMIN
    return DEFAULT_ROLE


class RoleCatalog:
    """Fixed mapping of role name to role record."""

    def __init__(self, roles: Iterable["Role"]):
        self._by_name = {role.name: role for role in roles}

    @classmethod
    def from_repository(cls, repository: "SQLRepository") -> "RoleCatalog":
        return cls(repository.list_roles())

    def find_by_name(self, name: RoleName | str) -> Optional["Role"]:
        key = name.value if isinstance(name, RoleName) else name
        return self._by_name.get(key)

    def require(self, name: RoleName | str) -> "Role":
        role = self.find_by_name(name)
        if role is None:
            key = name.value if isinstance(name, RoleName) else name
            raise RoleNotFoundError(role_name=key)
        return role

    def __len__(self) -> int:
        return len(self._by_name)
