"""Composition root: wire settings, logging, the role catalog and services."""
from __future__ import annotations

import logging

from accounts.core.config import Settings, get_settings
from accounts.core.logging_config import configure_logging
from accounts.domain.roles import RoleCatalog
from accounts.repositories.sql_repository import SQLRepository
from accounts.services.account_service import AccountService
from accounts.services.profile_service import ProfileService
from accounts.services.registration_service import RegistrationService

logger = logging.getLogger(__name__)


def create_account_service(settings: Settings | None = None, repository: SQLRepository | None = None) -> AccountService:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    repository = repository or SQLRepository()
    catalog = RoleCatalog.from_repository(repository)
    if not catalog:
        logger.warning("Role catalog is empty; run accounts.db.create_tables to seed it")
    return AccountService(
        registration=RegistrationService(repository=repository, catalog=catalog),
        profiles=ProfileService(repository=repository),
    )
