from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

VERIFICATION_CODE = "TG-OFFICIAL-2024"
VERIFICATION_INSTRUCTIONS = (
    "To receive the official badge, submit the verification code issued by the "
    "directory administrator in the verificationCode field when registering a channel."
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"
    port: int = Field(3000, validation_alias=AliasChoices("PORT", "APP_PORT"))
    data_file: Path = Path("channels.json")
    static_dir: Path = Path("public")
    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="APP_", env_file_encoding="utf-8")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

@lru_cache

def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()


settings = get_settings()
