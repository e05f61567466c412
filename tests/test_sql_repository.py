"""
Smoke tests for the SQLRepository against a temporary SQLite database.
"""
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select

from accounts.db.models import User, user_roles
from accounts.db.session import get_session
from accounts.domain.errors import EmailTakenError, UsernameTakenError


def _role_link_count(user_id: int) -> int:
    with get_session() as session:
        stmt = select(func.count()).select_from(user_roles).where(user_roles.c.user_id == user_id)
        return session.execute(stmt).scalar_one()


def _user(repo, username="alice", email="alice@example.com", role="user") -> User:
    role_obj = repo.get_role_by_name(role)
    return User(
        username=username,
        email=email,
        password_hash="hash",
        created_at=datetime.now(timezone.utc),
        roles={role_obj},
    )


def test_roles_are_seeded_once(repo):
    assert [r.name for r in repo.list_roles()] == ["user", "admin"]
    roles = repo.ensure_roles(["user", "admin", "user"])
    assert [r.name for r in roles] == ["user", "admin"]
    assert repo.get_role_by_name("admin") is not None
    assert repo.get_role_by_name("root") is None


def test_insert_and_lookup(repo):
    saved = repo.insert_user(_user(repo))
    assert saved.id is not None
    assert repo.exists_by_username("alice")
    assert not repo.exists_by_username("Alice")
    assert repo.exists_by_email("alice@example.com")

    fetched = repo.get_user(saved.id)
    assert fetched.username == "alice"
    assert fetched.role_names == {"user"}
    assert fetched.created_at.tzinfo is not None
    assert repo.get_user_by_username("alice").id == saved.id
    assert [u.username for u in repo.list_users()] == ["alice"]


def test_unique_constraints_map_to_identity_errors(repo):
    repo.insert_user(_user(repo))
    with pytest.raises(UsernameTakenError):
        repo.insert_user(_user(repo, email="other@example.com"))
    with pytest.raises(EmailTakenError):
        repo.insert_user(_user(repo, username="bob"))
    assert len(repo.list_users()) == 1


def test_update_user_keeps_roles(repo):
    saved = repo.insert_user(_user(repo, role="admin"))
    saved.email = "new@example.com"
    updated = repo.update_user(saved)
    assert updated.email == "new@example.com"
    assert repo.get_user(saved.id).role_names == {"admin"}


def test_delete_user(repo):
    saved = repo.insert_user(_user(repo))
    assert _role_link_count(saved.id) == 1
    assert repo.delete_user(saved.id) is True
    assert _role_link_count(saved.id) == 0
    assert repo.get_user(saved.id) is None
    assert repo.delete_user(saved.id) is False
    # role rows are reference data and stay
    assert len(repo.list_roles()) == 2
