"""
Application wiring.

Builds an AppState backed by the configured database and AI service.
"""

from snapdex.config import Settings, settings
from snapdex.db.database import create_db_engine, create_session_factory, init_db
from snapdex.db.key_value import SqlKeyValueStore
from snapdex.repository.key_value import KeyValueCardRepository
from snapdex.services.ai_service import build_ai_service
from snapdex.state.app_state import AppState


def build_repository(config: Settings = settings) -> KeyValueCardRepository:
    """Create the durable card repository, creating tables if needed."""
    engine = create_db_engine(config.database_url, echo=config.debug)
    init_db(engine)
    store = SqlKeyValueStore(create_session_factory(engine))
    return KeyValueCardRepository(
        store,
        cards_key=config.cards_key,
        counter_key=config.counter_key,
    )


def build_app_state(config: Settings = settings) -> AppState:
    """Create a fully wired AppState."""
    return AppState(
        repository=build_repository(config),
        ai_service=build_ai_service(config),
        seed_sample_cards=config.seed_sample_cards,
    )
