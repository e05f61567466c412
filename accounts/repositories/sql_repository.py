"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from accounts.db.models import Role, User
from accounts.db.session import get_session
from accounts.domain.errors import EmailTakenError, UsernameTakenError

logger = logging.getLogger(__name__)


def _duplicate_identity_error(exc: IntegrityError) -> Exception | None:
    """Translate a unique-constraint violation on users into the matching error."""
    detail = str(getattr(exc, "orig", exc)).lower()
    # sqlite reports the column ("users.username"), postgres the constraint name
    if "uq_users_username" in detail or "users.username" in detail:
        return UsernameTakenError()
    if "uq_users_email" in detail or "users.email" in detail:
        return EmailTakenError()
    return None


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- roles --------------------------
    def list_roles(self) -> list[Role]:
        with get_session() as session:
            return session.execute(select(Role).order_by(Role.id)).scalars().all()

    def get_role_by_name(self, name: str) -> Optional[Role]:
        with get_session() as session:
            stmt = select(Role).where(Role.name == name)
            return session.execute(stmt).scalar_one_or_none()

    def ensure_roles(self, names: Iterable[str]) -> list[Role]:
        """Insert any missing role rows and return the full catalog."""
        with get_session() as session:
            existing = set(session.execute(select(Role.name)).scalars().all())
            missing = [name for name in dict.fromkeys(names) if name not in existing]
            for name in missing:
                session.add(Role(name=name))
            session.commit()
            if missing:
                logger.info("Seeded roles", extra={"roles": missing})
            return session.execute(select(Role).order_by(Role.id)).scalars().all()

    # -------------------------- users --------------------------
    def exists_by_username(self, username: str) -> bool:
        with get_session() as session:
            stmt = select(User.id).where(User.username == username).limit(1)
            return session.execute(stmt).first() is not None

    def exists_by_email(self, email: str) -> bool:
        with get_session() as session:
            stmt = select(User.id).where(User.email == email).limit(1)
            return session.execute(stmt).first() is not None

    def get_user(self, user_id: int) -> Optional[User]:
        with get_session() as session:
            return session.get(User, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with get_session() as session:
            stmt = select(User).where(User.username == username)
            return session.execute(stmt).scalar_one_or_none()

    def list_users(self) -> list[User]:
        with get_session() as session:
            return session.execute(select(User).order_by(User.id)).scalars().all()

    def insert_user(self, user: User) -> User:
        """Persist a new user and its role links in a single transaction."""
        with get_session() as session:
            # catalog roles are detached; attach session-local copies instead
            user.roles = {session.merge(role, load=False) for role in user.roles}
            session.add(user)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                mapped = _duplicate_identity_error(exc)
                if mapped is None:
                    raise
                raise mapped from exc
            return user

    def update_user(self, user: User) -> User:
        with get_session() as session:
            merged = session.merge(user)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                mapped = _duplicate_identity_error(exc)
                if mapped is None:
                    raise
                raise mapped from exc
            return merged

    def delete_user(self, user_id: int) -> bool:
        with get_session() as session:
            user = session.get(User, user_id)
            if user is None:
                return False
            # session.delete also clears the user_roles rows
            session.delete(user)
            session.commit()
            return True
