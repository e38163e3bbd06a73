"""Database infrastructure setup."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_event

# Shared declarative base for the cars and inquiries tables
Base = declarative_base()

# Created on first use; the in-memory adapters never touch the database
_engine = None
_SessionLocal = None


def _connect_args(database_url: str) -> dict:
    # Request handlers run in a threadpool; SQLite connections are per-thread by default
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def _get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required for database operations")
        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,
            echo=settings.debug_mode,  # SQL echo in debug mode
            connect_args=_connect_args(settings.database_url),
        )
        log_event("db", "engine_created", dialect=_engine.dialect.name)
    return _engine


def get_db_session() -> Session:
    """
    Get a database session.

    Returns:
        SQLAlchemy session instance; the caller closes it
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_get_engine())
    return _SessionLocal()


def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
        log_event("db", "engine_disposed")
    _engine = None
    _SessionLocal = None
