"""Caller-role checks performed before the account services run."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from accounts.domain.errors import PermissionDeniedError


@dataclass(frozen=True)
class Caller:
    """Identity of whoever invokes an account operation."""

    username: str
    roles: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, username: str, roles: Iterable[str]) -> "Caller":
        return cls(username=username, roles=frozenset(roles))


def require_any_role(caller: Caller, *allowed: str) -> None:
    if not caller.roles.intersection(allowed):
        raise PermissionDeniedError(
            f"Access denied for '{caller.username}': requires one of {', '.join(sorted(allowed))}"
        )
