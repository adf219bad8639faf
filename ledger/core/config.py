"""Application configuration using pydantic settings with structured sections."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./storage/storage.db", alias="url")
    echo: bool = False
    # How long a SQLite writer waits for the database lock before failing.
    busy_timeout_ms: int = Field(default=5000, ge=0)


class LedgerSettings(BaseModel):
    default_transactions_count: int = Field(default=10, gt=0)
    max_transactions_count: int = Field(default=1000, gt=0)
    seed_wallet_count: int = Field(default=10, ge=0)
    seed_balance: Decimal = Field(default=Decimal("100.00"), ge=0, decimal_places=2)
    seed_on_startup: bool = True


class RateLimitSettings(BaseModel):
    enabled: bool = True
    max_requests: int = Field(default=1, gt=0)
    window_seconds: float = Field(default=1.0, gt=0)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_logs: bool = False


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Ledger Service"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    ledger: LedgerSettings = LedgerSettings()
    rate_limit: RateLimitSettings = RateLimitSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()
