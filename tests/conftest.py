from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the accounts package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from accounts.core import config as core_config  # noqa: E402
from accounts.db import create_tables  # noqa: E402
from accounts.db import models  # noqa: E402
from accounts.db import session as db_session  # noqa: E402
from accounts.domain.roles import RoleCatalog  # noqa: E402
from accounts.repositories.sql_repository import SQLRepository  # noqa: E402
from accounts.services.profile_service import ProfileService  # noqa: E402
from accounts.services.registration_service import RegistrationService  # noqa: E402


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite database with the role catalog seeded; caches reset on both ends."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    create_tables.create_all()

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def repo(temp_db) -> SQLRepository:
    return SQLRepository()


@pytest.fixture()
def catalog(repo) -> RoleCatalog:
    return RoleCatalog.from_repository(repo)


def _fast_hash(password: str) -> str:
    return f"test${password[::-1]}"


@pytest.fixture()
def registration(repo, catalog) -> RegistrationService:
    return RegistrationService(repository=repo, catalog=catalog, hasher=_fast_hash)


@pytest.fixture()
def profiles(repo) -> ProfileService:
    return ProfileService(repository=repo, hasher=_fast_hash)
