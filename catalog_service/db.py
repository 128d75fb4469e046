# catalog_service/db.py

"""
Database configuration and session management for FastAPI app.
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import DATABASE_URL

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    # SQLite is used for local runs and tests: one shared connection so an
    # in-memory database survives across sessions and threads.
    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    # pool_pre_ping=True helps maintain healthy connections in a pool
    return {"pool_pre_ping": True}


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))

# autocommit=False ensures transactions must be committed explicitly.
# autoflush=False means changes aren't flushed to DB until commit or explicit flush.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for the ORM models
Base = declarative_base()


def init_db():
    """Create all tables that do not exist yet."""
    # models must be imported so they register on Base.metadata
    from . import models  # noqa: F401

    logger.info(f"Ensuring tables exist on {engine.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=engine)


def get_db():
    """
    Dependency to provide a new database session for FastAPI endpoints.
    A session is created for each request and automatically closed after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
