"""
Relational connection utility.

The engine and the session factory are created lazily so that importing
the application never opens a connection; the URL comes from settings
(MySQL by default, any SQLAlchemy URL through DATABASE_URL).

`get_db_session()` is the transaction boundary of the relational gateways:
commit on success, rollback and re-raise on any error.
"""
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from recruiting.core.config import get_settings
from recruiting.db.tables import Base

logger = logging.getLogger(__name__)

settings = get_settings()

_engine: Engine = None
_SessionLocal: sessionmaker = None


def get_engine() -> Engine:
    """Get or create the engine (singleton pattern)"""
    global _engine
    if _engine is None:
        url = settings.sqlalchemy_url
        if url.startswith("sqlite"):
            _engine = create_engine(url, echo=settings.debug)
        else:
            # pool_size=5: maintain 5 connections ready
            # max_overflow=10: allow 10 extra connections under load
            # pool_recycle: MySQL drops idle connections after wait_timeout
            _engine = create_engine(
                url,
                pool_size=5,
                max_overflow=10,
                pool_recycle=3600,
                pool_pre_ping=True,
                echo=settings.debug  # Log SQL queries in debug mode
            )
    return _engine


def get_session_factory() -> sessionmaker:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


@contextmanager
def get_db_session(session_factory: sessionmaker = None):
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.get(Consultant, 1)
    """
    session = (session_factory or get_session_factory())()
    try:
        yield session
        session.commit()
    except Exception:
        logger.warning("Rolling back relational transaction", exc_info=True)
        session.rollback()
        raise
    finally:
        session.close()


def init_mysql_schema(engine: Engine = None) -> None:
    """Create missing tables. Call once during app startup."""
    Base.metadata.create_all(engine or get_engine())
    logger.info("Relational schema ready")


def check_mysql_connection() -> bool:
    """
    Test if the relational store is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            row = db.execute(text("SELECT 1")).fetchone()
            return row[0] == 1
    except Exception as e:
        logger.error("Relational store connection failed: %s", e)
        return False
