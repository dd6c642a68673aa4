"""
Database engine and session management.

Every engine operation runs inside one session scope so that the guard
checks and the mutations they protect commit or roll back together.
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker

from frontline.config import get_settings
from frontline.database.base import Base

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_session_factory: sessionmaker | None = None


def make_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine, enabling foreign keys on SQLite."""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    engine = create_engine(url, echo=echo, connect_args=connect_args, pool_pre_ping=True)

    if url.startswith("sqlite"):
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def get_engine() -> Engine:
    """Get or create the engine configured in settings."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = make_engine(settings.database_url, echo=settings.database.echo)
    return _engine


def get_session_factory() -> sessionmaker:
    """Get or create the session factory."""
    global _session_factory
    if _session_factory is None:
        _session_factory = make_session_factory(get_engine())
    return _session_factory


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def configure_engine(engine: Engine) -> None:
    """Replace the process-wide engine (used by tests and the CLI)."""
    global _engine, _session_factory
    _engine = engine
    _session_factory = make_session_factory(engine)


def init_db(engine: Engine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Register mapped classes on the metadata
    import frontline.models  # noqa: F401

    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database schema ready at {engine.url.render_as_string(hide_password=True)}")


def check_db_connection(engine: Engine | None = None) -> bool:
    """Return True if the database answers a trivial query."""
    engine = engine or get_engine()
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database connection check failed: {e}")
        return False


@contextmanager
def get_db_context(
    session_factory: sessionmaker | None = None,
) -> Generator[Session, None, None]:
    """
    Context manager for database sessions.

    Usage:
        with get_db_context() as db:
            rnd = db.get(Round, round_id)
            db.commit()

    Ensures:
        - Rollback on error
        - Session is closed even on exceptions
    """
    factory = session_factory or get_session_factory()
    db = factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
