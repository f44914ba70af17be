"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pricing service configuration settings."""

    debug_mode: bool = False
    price_repository: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when price_repository=postgres
    seed_prices: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
