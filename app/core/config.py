# app/core/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    host: str = "0.0.0.0"
    port: int = 5000

    mongo_uri: str = "mongodb://localhost:27017/taskmaster"
    # Falls back to the database named in mongo_uri, then "taskmaster".
    mongo_db_name: Optional[str] = None
    mongo_timeout_ms: int = 2000

    app_version: str = "1.0.0"
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "APP_ENV"),
    )
    hostname: str = "local"

    log_level: str = "INFO"
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
