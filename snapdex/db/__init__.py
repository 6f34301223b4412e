from snapdex.db.database import (
    create_db_engine,
    create_session_factory,
    drop_db,
    init_db,
)
from snapdex.db.key_value import InMemoryKeyValueStore, KeyValueStore, SqlKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SqlKeyValueStore",
    "create_db_engine",
    "create_session_factory",
    "drop_db",
    "init_db",
]
