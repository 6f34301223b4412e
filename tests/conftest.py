from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from sqlalchemy import Engine

from snapdex.db.database import create_db_engine, create_session_factory, drop_db, init_db
from snapdex.db.key_value import SqlKeyValueStore
from snapdex.models.card import Card, CardType, IntValue, Stat, TextValue
from snapdex.repository.key_value import KeyValueCardRepository
from snapdex.repository.memory import InMemoryCardRepository

CardFactory = Callable[..., Card]


@pytest.fixture
def make_card() -> CardFactory:
    """Build cards with sensible defaults; keyword arguments override fields."""

    def _make(**overrides: object) -> Card:
        fields: dict[str, object] = {
            "display_id": 1,
            "title": "Ruby Crystal",
            "description": "A vibrant red crystal.",
            "image_url": None,
            "stats": (
                Stat(category="Power", value=IntValue(65)),
                Stat(category="Element", value=TextValue("Fire")),
            ),
            "type": CardType.FIRE,
        }
        fields.update(overrides)
        return Card(**fields)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """File-backed SQLite URL, so separate engines see the same data."""
    return f"sqlite:///{tmp_path / 'snapdex.db'}"


@pytest.fixture
def engine(database_url: str) -> Iterator[Engine]:
    engine = create_db_engine(database_url)
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def kv_store(engine: Engine) -> SqlKeyValueStore:
    return SqlKeyValueStore(create_session_factory(engine))


@pytest.fixture
def repository(kv_store: SqlKeyValueStore) -> KeyValueCardRepository:
    return KeyValueCardRepository(kv_store)


@pytest.fixture
def memory_repository() -> InMemoryCardRepository:
    return InMemoryCardRepository()
