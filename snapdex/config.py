from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "SnapDex"
    debug: bool = False

    database_url: str = "sqlite:///snapdex.db"

    # Storage slot names, kept stable so existing collections keep loading
    cards_key: str = "snapDexCards"
    counter_key: str = "totalSnapDexCardsMade"

    # "mock" returns fixed stub values; "placeholder" samples random stats
    ai_service: Literal["mock", "placeholder"] = "mock"
    placeholder_delay_seconds: float = 2.0

    # Show the sample cards in memory when the stored collection is empty
    seed_sample_cards: bool = False


settings = Settings()
