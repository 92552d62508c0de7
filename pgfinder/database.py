from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi import Request
from .config import Settings

Base = declarative_base()


def build_engine(settings: Settings):
    """Create the engine for ``settings.database_url``.

    In-memory SQLite gets a single shared connection so every session sees
    the same database.
    """
    url = settings.database_url
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    # Use pre_ping to validate connections (good for Postgres in production)
    return create_engine(url, pool_pre_ping=True)


def build_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """Dependency to get database session"""
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
