"""Seed the first admin account.

Admins moderate listings, so a fresh deployment needs one before any PG can
go live. Credentials come from ``ADMIN_NAME``, ``ADMIN_EMAIL`` and
``ADMIN_PASSWORD``; nothing happens when an admin already exists.
"""

import logging
import os
import sys

from pgfinder.config import Settings
from pgfinder.core import configure_logging
from pgfinder.core.exceptions import ConflictError
from pgfinder.database import Base, build_engine, build_session_factory
from pgfinder.models import User, Role
from pgfinder.services.auth import AuthService

logger = logging.getLogger("pgfinder.create_users")


def create_initial_admin(settings: Settings) -> bool:
    email = os.getenv("ADMIN_EMAIL")
    password = os.getenv("ADMIN_PASSWORD")
    if not email or not password:
        logger.error("ADMIN_EMAIL and ADMIN_PASSWORD must be set")
        return False

    engine = build_engine(settings)
    Base.metadata.create_all(bind=engine)
    db = build_session_factory(engine)()
    try:
        existing = db.query(User).filter(User.role == Role.ADMIN.value).count()
        if existing:
            logger.info("Database already has %d admin(s), nothing to do", existing)
            return True

        auth = AuthService(settings)
        try:
            result = auth.signup(db, os.getenv("ADMIN_NAME", "Administrator"), email, password, Role.ADMIN.value)
        except ConflictError:
            logger.error("%s is already registered with a non-admin account", email)
            return False
        logger.info("Created admin %s (id %s)", result.user.email, result.user.id)
        return True
    finally:
        db.close()


if __name__ == "__main__":
    settings = Settings()
    configure_logging(settings.log_level, settings.log_format)
    sys.exit(0 if create_initial_admin(settings) else 1)
