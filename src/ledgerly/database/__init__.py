"""Database layer for ledgerly application."""

from ledgerly.database.base import CredentialStore, Database, SettingsStore
from ledgerly.database.factories import create_sqlite_database

__all__ = ["CredentialStore", "Database", "SettingsStore", "create_sqlite_database"]
