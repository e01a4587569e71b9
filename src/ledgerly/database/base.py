"""Abstract key/value persistence interfaces."""

from abc import ABC, abstractmethod
from typing import Optional


class CredentialStore(ABC):
    """Secure storage for small secrets such as the signed-in user identifier."""

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        pass

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``. Removing a missing key is not an error."""
        pass


class SettingsStore(ABC):
    """Plain application preferences (first-run flags, profile details)."""

    @abstractmethod
    def get_setting(self, key: str) -> Optional[str]:
        """Return the setting value, or None if unset."""
        pass

    @abstractmethod
    def set_setting(self, key: str, value: str) -> None:
        """Set a setting value."""
        pass

    @abstractmethod
    def delete_setting(self, key: str) -> None:
        """Unset a setting. Unsetting a missing key is not an error."""
        pass


class Database(CredentialStore, SettingsStore):
    """Abstract database holding credentials and settings."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass
