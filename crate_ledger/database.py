"""
Datenbankverbindung und Session-Management
"""
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from crate_ledger.config import get_settings
from crate_ledger.exceptions import ConfigurationMissing


class Base(DeclarativeBase):
    """Basis-Klasse für alle SQLAlchemy Models"""
    pass


@lru_cache
def get_engine() -> Engine:
    """
    Engine wird erst beim ersten Zugriff erstellt.
    Ohne DATABASE_URL wird ConfigurationMissing geworfen.
    """
    settings = get_settings()
    if not settings.database_url:
        raise ConfigurationMissing(["DATABASE_URL"])

    if settings.database_url.startswith("sqlite"):
        return create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20
    )


@lru_cache
def get_session_factory() -> sessionmaker:
    """Session Factory für die konfigurierte Engine"""
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def get_db():
    """
    Dependency für FastAPI - liefert eine DB-Session.
    Wird automatisch nach dem Request geschlossen.
    """
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()
