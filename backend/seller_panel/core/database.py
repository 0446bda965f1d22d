"""
PostgreSQL access for the Seller Panel

This module centralizes every way the service talks to storage:
- psycopg2 direct connections (all repository queries)
- SQLAlchemy engine (table definitions / schema creation only)
- Supabase client (Storage bucket for product and profile images)

Engines and clients are built on first use so the app can be imported
(and tested) without a reachable database.
"""
import logging
import time
from functools import lru_cache

import psycopg2
from psycopg2.extras import RealDictCursor
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base

from .config import settings

logger = logging.getLogger(__name__)

# Base for ORM table definitions
Base = declarative_base()

# Seconds psycopg2 waits for the server before giving up on an attempt
CONNECTION_TIMEOUT = 10


# ============================================================================
# SQLAlchemy Configuration (schema only)
# ============================================================================

@lru_cache(maxsize=1)
def get_engine():
    """Build the SQLAlchemy engine once, using DATABASE_URL"""
    if not settings.DATABASE_URL:
        raise RuntimeError("DATABASE_URL not configured")

    return create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


# ============================================================================
# psycopg2 Connections with Retry Logic
# ============================================================================

def get_db_connection_with_retry(max_retries=3, retry_delay=1.0, dict_rows=True):
    """
    Get a psycopg2 connection with automatic retry on connection failures

    Args:
        max_retries: Maximum number of connection attempts (default: 3)
        retry_delay: Initial delay between retries in seconds, doubled each attempt
        dict_rows: Use RealDictCursor so rows come back as dicts (default: True)

    Returns:
        psycopg2 connection object

    Raises:
        RuntimeError: If DATABASE_URL is not configured
        psycopg2.OperationalError: If all retry attempts fail
    """
    database_url = settings.DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")

    cursor_factory = RealDictCursor if dict_rows else None
    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = psycopg2.connect(
                database_url,
                cursor_factory=cursor_factory,
                connect_timeout=CONNECTION_TIMEOUT,
            )

            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()

            return conn

        except psycopg2.OperationalError as e:
            last_error = e
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            if attempt < max_retries:
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)
            else:
                logger.error(f"All {max_retries} connection attempts failed")

    raise last_error


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Used by every repository. Callers own the connection and must close it.
    """
    return get_db_connection_with_retry()


# ============================================================================
# Supabase Client (Storage)
# ============================================================================

@lru_cache(maxsize=1)
def get_supabase():
    """
    Supabase client for Storage uploads

    Usage:
        @router.post("/upload")
        def upload(sb: Client = Depends(get_supabase)):
            ...
    """
    from supabase import create_client

    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
        raise RuntimeError("Supabase storage not configured. Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY")

    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
