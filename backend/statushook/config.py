"""Application configuration."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings."""

    app_name: str = "statushook"
    log_level: str = "INFO"

    signing_secret: str = Field(default="", validation_alias=AliasChoices("jwt_secret", "signing_secret"))
    jwt_algorithms: list[str] = ["HS256"]
    allowed_origin: str = Field(default="*", validation_alias=AliasChoices("cors_allow_origin", "allowed_origin"))

    webhook_url: str | None = Field(default=None, validation_alias=AliasChoices("discord_url", "webhook_url"))
    webhook_timeout_seconds: float = 10.0
    status_url: str | None = None
    image_base_url: str | None = Field(default=None, validation_alias=AliasChoices("image_url", "image_base_url"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""

    return Settings()
