"""Key-value store adapters."""

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from calearner.exceptions import StorageError
from calearner.models import StoredValue

logger = structlog.get_logger(__name__)


class SqlAlchemyKeyValueStore:
    """Key-value store backed by the `stored_values` table.

    Every call runs in its own short transaction; there is no cross-key
    atomicity.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory

    def get(self, key: str) -> str | None:
        try:
            with self.session_factory() as db:
                row = db.execute(
                    select(StoredValue.value).where(StoredValue.key == key)
                ).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(key, str(e)) from e
        return row

    def set(self, key: str, value: str) -> None:
        try:
            with self.session_factory() as db, db.begin():
                existing = db.get(StoredValue, key)
                if existing is None:
                    db.add(StoredValue(key=key, value=value))
                else:
                    existing.value = value
        except SQLAlchemyError as e:
            logger.error("stored_value_write_failed", key=key, error=str(e))
            raise StorageError(key, str(e)) from e

    def remove(self, key: str) -> None:
        try:
            with self.session_factory() as db, db.begin():
                db.execute(delete(StoredValue).where(StoredValue.key == key))
        except SQLAlchemyError as e:
            logger.error("stored_value_delete_failed", key=key, error=str(e))
            raise StorageError(key, str(e)) from e


class InMemoryKeyValueStore:
    """Process-local store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._values)
