"""Tests for the credential and settings stores backed by SQLAlchemy."""

from ledgerly.database.base import CredentialStore, Database, SettingsStore
from ledgerly.database.factories import create_sqlite_database


class TestCredentials:
    """Tests for the CredentialStore operations."""

    def test_database_is_both_stores(self, temp_db):
        assert isinstance(temp_db, Database)
        assert isinstance(temp_db, CredentialStore)
        assert isinstance(temp_db, SettingsStore)

    def test_read_missing_returns_none(self, temp_db):
        assert temp_db.read("user_identifier") is None

    def test_save_and_read(self, temp_db):
        temp_db.save("user_identifier", "001234.abcd")
        assert temp_db.read("user_identifier") == "001234.abcd"

    def test_save_replaces_value(self, temp_db):
        temp_db.save("user_identifier", "first")
        temp_db.save("user_identifier", "second")
        assert temp_db.read("user_identifier") == "second"

    def test_delete(self, temp_db):
        temp_db.save("user_identifier", "001234.abcd")
        temp_db.delete("user_identifier")
        assert temp_db.read("user_identifier") is None

    def test_delete_missing_is_noop(self, temp_db):
        temp_db.delete("never-stored")
        assert temp_db.read("never-stored") is None


class TestSettings:
    """Tests for the SettingsStore operations."""

    def test_set_and_get(self, temp_db):
        temp_db.set_setting("first_clean_done", "1")
        assert temp_db.get_setting("first_clean_done") == "1"

    def test_update(self, temp_db):
        temp_db.set_setting("profile_name", "Alex")
        temp_db.set_setting("profile_name", "Sam")
        assert temp_db.get_setting("profile_name") == "Sam"

    def test_delete_setting(self, temp_db):
        temp_db.set_setting("guest_mode", "1")
        temp_db.delete_setting("guest_mode")
        assert temp_db.get_setting("guest_mode") is None

    def test_settings_and_credentials_are_separate(self, temp_db):
        temp_db.save("shared", "secret")
        assert temp_db.get_setting("shared") is None
        temp_db.set_setting("shared", "plain")
        assert temp_db.read("shared") == "secret"


def test_values_survive_reconnect(temp_db):
    temp_db.save("user_identifier", "persisted")
    temp_db.set_setting("first_clean_done", "1")
    temp_db.disconnect()

    other = create_sqlite_database(database_path=temp_db.database_path)
    try:
        assert other.read("user_identifier") == "persisted"
        assert other.get_setting("first_clean_done") == "1"
    finally:
        other.disconnect()


def test_default_location_uses_data_dir(tmp_path):
    db = create_sqlite_database(data_dir=tmp_path)
    try:
        db.set_setting("k", "v")
    finally:
        db.disconnect()
    assert (tmp_path / "ledgerly.db").exists()
