"""
PostgreSQL database access

This module centralizes every way of reaching the database:
- psycopg2 direct connections (used by the repositories)
- SQLAlchemy declarative Base and engine (schema definition / table creation)

Author: TM3
Updated: 2025-10-17
"""
import time
import logging

import psycopg2
from psycopg2.extras import RealDictCursor
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration (schema definition)
# ============================================================================

# Base for the table models in app.models
Base = declarative_base()

_engine = None


def get_engine():
    """
    Return the SQLAlchemy engine, creating it on first use

    The engine is only needed for table creation, so it is not built at
    import time (tests import this module without a database).
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            _database_url(),
            pool_pre_ping=True,  # Check the connection before using it
        )
    return _engine


def init_db():
    """
    Create every table declared in app.models (no-op for existing tables)
    """
    # Register the models on Base.metadata
    import app.models  # noqa: F401

    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database tables ready: {', '.join(sorted(Base.metadata.tables))}")


# ============================================================================
# psycopg2 Direct Connections
# ============================================================================

def _database_url() -> str:
    database_url = settings.DATABASE_URL
    if not database_url:
        raise Exception("DATABASE_URL not configured")
    return database_url


def get_db_connection():
    """
    Get a direct psycopg2 database connection (returns tuples)

    Returns:
        psycopg2 connection object

    Raises:
        Exception if DATABASE_URL is not configured
    """
    return psycopg2.connect(_database_url())


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Use this for code that builds domain models from rows.

    Returns:
        psycopg2 connection with RealDictCursor

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM orders")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    return psycopg2.connect(_database_url(), cursor_factory=RealDictCursor)


# ============================================================================
# Database Connection with Retry Logic
# ============================================================================

def get_db_connection_with_retry(max_retries=3, retry_delay=1.0):
    """
    Get a psycopg2 connection with automatic retry on connection failures

    Retries failed connections up to max_retries times with exponential
    backoff between attempts. Used by the health check.

    Args:
        max_retries: Maximum number of connection attempts (default: 3)
        retry_delay: Initial delay between retries in seconds (default: 1.0)

    Returns:
        psycopg2 connection object

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
    """
    database_url = _database_url()
    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = psycopg2.connect(database_url)

            # Test connection with a simple query
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()

            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            last_error = e
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            # Don't retry on last attempt
            if attempt < max_retries:
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)
            else:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

    raise last_error if last_error else Exception("Connection failed after all retries")
