"""
Key-value storage slots.

A KeyValueStore holds named text slots. The card repository keeps the whole
collection in one slot and the display id counter in another.
"""

from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from snapdex.models.db import KeyValueEntryDB


class KeyValueStore(ABC):
    """Durable named text slots."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the slot value, or None if the slot was never written."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Overwrite the slot value."""

    @abstractmethod
    def increment(self, key: str) -> int:
        """
        Increment an integer slot and return the new value.

        A missing slot counts as 0, so the first call returns 1.

        Raises:
            ValueError: If the slot holds something other than an integer
        """


class SqlKeyValueStore(KeyValueStore):
    """
    Key-value store backed by the kv_entries table.

    Each call runs in its own session and commits before returning.
    SQLAlchemyError from the database propagates to the caller.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        with self._session_factory() as session:
            entry = session.get(KeyValueEntryDB, key)
            return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        with self._session_factory.begin() as session:
            entry = session.get(KeyValueEntryDB, key)
            if entry:
                entry.value = value
            else:
                session.add(KeyValueEntryDB(key=key, value=value))

    def increment(self, key: str) -> int:
        # Read and write in one transaction so a crash never hands out a value twice
        with self._session_factory.begin() as session:
            entry = session.execute(
                select(KeyValueEntryDB).where(KeyValueEntryDB.key == key).with_for_update()
            ).scalar_one_or_none()
            if entry:
                next_value = int(entry.value) + 1
                entry.value = str(next_value)
            else:
                next_value = 1
                session.add(KeyValueEntryDB(key=key, value=str(next_value)))
        return next_value


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def increment(self, key: str) -> int:
        next_value = int(self.data.get(key, "0")) + 1
        self.data[key] = str(next_value)
        return next_value
