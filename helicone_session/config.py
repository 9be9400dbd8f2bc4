"""Application configuration loaded from environment variables."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from .env file."""

    # App
    app_name: str = "helicone-session"
    app_env: str = "development"
    debug: bool = False

    # Helicone gateway the tracked client talks to
    helicone_base_url: str = "https://anthropic.helicone.ai"

    # Session labelling
    session_name_prefix: str = "Session"

    # Outbound HTTP
    request_timeout: float = 60.0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    return Settings()
