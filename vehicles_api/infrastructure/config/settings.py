"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Vehicles API configuration settings."""

    debug_mode: bool = False
    car_repository: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when car_repository=postgres
    maps_endpoint: str = "http://localhost:9191"
    service_discovery: str = "static"  # static or eureka
    eureka_url: str = "http://localhost:8761/eureka"
    pricing_service_name: str = "pricing-service"
    pricing_service_url: str = "http://localhost:8082"
    collaborator_timeout_seconds: float = 0.5
    collaborator_cache_enabled: bool = False
    collaborator_cache_ttl_seconds: int = 30
    redis_url: str = "redis://localhost:6379/0"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
