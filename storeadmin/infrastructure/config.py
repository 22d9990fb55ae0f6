"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://storeadmin:storeadmin_dev_password@db:5432/storeadmin"

    # Caller identity, set by the upstream identity provider
    caller_id_header: str = "X-User-ID"

    # Catalog read-through cache (0 disables caching)
    catalog_cache_ttl_seconds: int = 60

    # Skip option values that do not belong to their option when
    # replacing variants on update instead of rejecting the request
    lenient_variant_updates: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
