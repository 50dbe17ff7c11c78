# modreports/database.py - Database Configuration
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker

from modreports.config import settings
from modreports.errors import StoreUnavailable

logger = logging.getLogger(__name__)

# Database URL loaded from .env via modreports/config.py
DATABASE_URL = settings.DATABASE_URL


def _create_engine(url: str):
    if str(url).startswith("sqlite"):
        return create_engine(url, echo=settings.SQL_ECHO, connect_args={"check_same_thread": False})
    return create_engine(url, echo=settings.SQL_ECHO, pool_pre_ping=True)


engine = _create_engine(DATABASE_URL)

# Session maker
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


# Dependency to get database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def store_errors(db):
    """Turn connection-level failures into StoreUnavailable.

    The session is rolled back before re-raising so it can be reused.
    Anything that is not a transport problem propagates untouched.
    """
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        db.rollback()
        logger.warning("Report store unavailable: %s", exc.orig if exc.orig is not None else exc)
        raise StoreUnavailable(str(exc)) from exc
