"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from termcount.models import ALL_DDL
from termcount.settings import DB_PATH

MEMORY_DB = ":memory:"

_local = threading.local()


def db_exists(path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return path == MEMORY_DB or Path(path).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def connect(path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open a writable connection with all tables in place."""
    conn = duckdb.connect(path)
    init_tables(conn)
    return conn


def _ensure_db_exists(path: str) -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)
        connect(path).close()


def get_db(read_only: bool = False, path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if getattr(_local, "conn", None) is None:
        if path == MEMORY_DB:
            _local.conn = connect(path)
        else:
            _ensure_db_exists(path)
            _local.conn = duckdb.connect(path, read_only=read_only)
        logger.debug("DB connected: {} (read_only={})", path, read_only)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if getattr(_local, "conn", None) is not None:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")
