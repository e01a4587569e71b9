"""Shared pytest fixtures for ledgerly tests."""

import tempfile
import os
import pytest

from ledgerly.database.factories import create_sqlite_database
from ledgerly.domain.profile import ProfileService
from ledgerly.logging_setup import reset_logging
from ledgerly.store.scheduling import ManualScheduler
from ledgerly.store.transaction_store import TransactionRecordStore

from helpers import RecordingStorage


@pytest.fixture(autouse=True)
def clean_logging():
    """Drop the handler a CLI invocation installs, so it never outlives the test."""
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the real ~/.ledgerly and any exported overrides."""
    monkeypatch.delenv("LEDGERLY_DB_PATH", raising=False)
    monkeypatch.delenv("LEDGERLY_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LEDGERLY_DATA_DIR", str(tmp_path / "default-data"))


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def profile_service(temp_db):
    """Create a ProfileService with a temporary database."""
    return ProfileService(temp_db, temp_db)


@pytest.fixture
def data_dir(tmp_path):
    """Temporary data directory for the transaction file."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def scheduler():
    """Virtual-clock scheduler so debounce windows pass instantly."""
    return ManualScheduler()


@pytest.fixture
def storage(data_dir):
    """Recording JSON storage in the temporary data directory."""
    return RecordingStorage(data_dir / "transactions.json")


@pytest.fixture
def store(storage, scheduler):
    """Uninitialized store wired to the recording storage and manual scheduler."""
    return TransactionRecordStore(storage=storage, scheduler=scheduler)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(data_dir, temp_db):
    """Global CLI options pointing at temporary storage."""
    return ["--data-dir", str(data_dir), "--db-path", temp_db.database_path]
