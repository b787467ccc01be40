"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Everything has a default so the service can boot without a database
    (search then reports every storage-backed source as unavailable and
    health stays green). DATABASE_URL points at the platform's Postgres.
    """

    # App
    app_name: str = "bubbles-search"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (read-only access to the platform's relational store)
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # Security: tokens are issued by the platform's auth service with the same key.
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480  # 8 hours

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"

    # Search engine
    search_cache_backend: str = "memory"  # "memory" or "redis"
    search_cache_ttl_seconds: int = 300
    search_cache_max_entries: int = 1000
    search_trending_capacity: int = 1000
    search_source_timeout_seconds: float = 10.0
    search_default_types: str = "posts,pages,comments,legal,settings"

    # Redis (only when search_cache_backend == "redis")
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_search_settings(self) -> "Settings":
        """Validate cache backend and search tunables."""
        if self.search_cache_backend not in ("memory", "redis"):
            raise ValueError(
                f"search_cache_backend must be 'memory' or 'redis', got: {self.search_cache_backend!r}"
            )
        if self.search_cache_ttl_seconds <= 0:
            raise ValueError("SEARCH_CACHE_TTL_SECONDS must be a positive number of seconds")
        if self.search_trending_capacity <= 0:
            raise ValueError("SEARCH_TRENDING_CAPACITY must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
