# squirrel_registry/config.py
"""
Application settings, read from SQUIRREL_* environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SQUIRREL_",
        extra="ignore",
    )

    db_url: str = Field(default="sqlite:///db.sqlite", description="SQLAlchemy URL; file in project root")
    timezone: str = Field(default="America/New_York", description="Zone used for a new sighting's date")
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
