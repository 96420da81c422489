"""Application configuration via Pydantic settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration object loaded once from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    app_name: str = Field("Barberia Booking API", alias="APP_NAME")
    debug: bool = Field(False, alias="DEBUG")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    database_url: str = Field(..., alias="DATABASE_URL")
    jwt_secret: str = Field(..., alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    jwt_expires_in_minutes: int = Field(15, alias="JWT_EXPIRES_IN")

    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: Literal["lax", "strict", "none"] = Field("lax", alias="COOKIE_SAMESITE")
    cookie_prefix_host: bool = Field(False, alias="COOKIE_PREFIX_HOST")

    default_timezone: str = Field("America/Argentina/Buenos_Aires", alias="DEFAULT_TIMEZONE")

    @property
    def access_cookie_name(self) -> str:
        return "__Host-access_token" if self.cookie_prefix_host else "access_token"


@lru_cache(1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
