"""Configuration resolved from CLI options and environment variables."""

import os
from pathlib import Path
from typing import Optional

DATA_DIR_ENV = "LEDGERLY_DATA_DIR"
DB_PATH_ENV = "LEDGERLY_DB_PATH"

APP_ID = "ledgerly"
TRANSACTIONS_FILENAME = "transactions.json"
DB_FILENAME = "ledgerly.db"


def resolve_data_dir(data_dir: Optional[str | Path] = None) -> Path:
    """Resolve the writable storage location.

    Args:
        data_dir: Explicit directory. If None, checks the LEDGERLY_DATA_DIR
            environment variable, then defaults to ~/.ledgerly

    Returns:
        Path to the directory (created if missing)
    """
    if data_dir is None:
        data_dir = os.environ.get(DATA_DIR_ENV)

    if data_dir is None:
        data_dir = Path.home() / ".ledgerly"

    path = Path(data_dir).expanduser()
    path.mkdir(parents=True, exist_ok=True)
    return path


def transactions_file_path(data_dir: Optional[str | Path] = None) -> Path:
    """Path of the transactions file inside the application subfolder."""
    folder = resolve_data_dir(data_dir) / APP_ID
    folder.mkdir(parents=True, exist_ok=True)
    return folder / TRANSACTIONS_FILENAME


def database_path(
    database_path: Optional[str] = None, data_dir: Optional[str | Path] = None
) -> str:
    """Resolve the SQLite file: explicit path, then LEDGERLY_DB_PATH, then the data dir."""
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        database_path = str(resolve_data_dir(data_dir) / DB_FILENAME)

    return database_path
