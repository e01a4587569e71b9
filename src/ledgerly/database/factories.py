"""Database factory functions for creating database instances."""

from pathlib import Path
from typing import Optional

from ledgerly.config import database_path as resolve_database_path
from ledgerly.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(
    database_path: Optional[str] = None, data_dir: Optional[str | Path] = None
) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks the
            LEDGERLY_DB_PATH environment variable, then defaults to
            ledgerly.db inside the data directory
        data_dir: Data directory used for the default location

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path, data_dir)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
