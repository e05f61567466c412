"""Utility script to create the schema and seed the role catalog."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(seed_roles: bool = True) -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    if seed_roles:
        from accounts.domain.roles import RoleName
        from accounts.repositories.sql_repository import SQLRepository

        SQLRepository().ensure_roles(name.value for name in RoleName)


if __name__ == "__main__":
    try:
        create_all()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
