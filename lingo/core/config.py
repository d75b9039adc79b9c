from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Inflection
    DEFAULT_LANGUAGE: str = "en"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    model_config = SettingsConfigDict(env_prefix="LINGO_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
