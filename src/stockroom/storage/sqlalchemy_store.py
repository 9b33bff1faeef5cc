"""Generic SQLAlchemy storage implementation."""

from typing import Optional
from sqlalchemy.orm import Session

from stockroom.storage.base import Storage
from stockroom.storage.models import StoredCollection, create_session_factory


class SQLAlchemyStorage(Storage):
    """SQLAlchemy-based implementation of the Storage interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy storage.

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

    def load(self, key: str) -> Optional[str]:
        """Return the stored blob for key, or None if absent."""
        session = self._get_session()
        row = session.get(StoredCollection, key)
        if row is None:
            return None
        return row.value

    def save(self, key: str, value: str) -> None:
        """Insert or replace the blob stored under key."""
        session = self._get_session()
        row = session.get(StoredCollection, key)
        if row is None:
            session.add(StoredCollection(key=key, value=value))
        else:
            row.value = value
        try:
            session.commit()
        except Exception:
            session.rollback()
            raise

    def close(self) -> None:
        """Close the current session."""
        if self._session is not None:
            self._session.close()
            self._session = None
