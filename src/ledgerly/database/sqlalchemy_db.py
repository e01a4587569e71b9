"""Generic SQLAlchemy database implementation."""

from typing import Optional, Type
from sqlalchemy.orm import Session

from ledgerly.database.base import Database
from ledgerly.database.models import Credential, Setting, create_session_factory


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of the Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    # Shared key/value helpers
    def _get_value(self, model: Type[Credential] | Type[Setting], key: str) -> Optional[str]:
        session = self._get_session()
        row = session.query(model).filter(model.key == key).first()
        return None if row is None else row.value

    def _set_value(self, model: Type[Credential] | Type[Setting], key: str, value: str) -> None:
        session = self._get_session()
        row = session.query(model).filter(model.key == key).first()
        if row is None:
            session.add(model(key=key, value=value))
        else:
            row.value = value
        session.commit()

    def _delete_value(self, model: Type[Credential] | Type[Setting], key: str) -> None:
        session = self._get_session()
        session.query(model).filter(model.key == key).delete()
        session.commit()

    # Credential operations
    def save(self, key: str, value: str) -> None:
        """Store a credential, replacing any previous value."""
        self._set_value(Credential, key, value)

    def read(self, key: str) -> Optional[str]:
        """Read a credential."""
        return self._get_value(Credential, key)

    def delete(self, key: str) -> None:
        """Delete a credential."""
        self._delete_value(Credential, key)

    # Setting operations
    def get_setting(self, key: str) -> Optional[str]:
        """Get a setting value."""
        return self._get_value(Setting, key)

    def set_setting(self, key: str, value: str) -> None:
        """Set a setting value."""
        self._set_value(Setting, key, value)

    def delete_setting(self, key: str) -> None:
        """Unset a setting."""
        self._delete_value(Setting, key)
