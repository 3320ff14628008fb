"""
Runtime settings, read from HANMORPH_* environment variables or .env.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HANMORPH_", env_file=".env", extra="ignore")

    # Directory of <category>.txt word lists; None uses the bundled data.
    dictionary_dir: str | None = None

    # Longest dictionary word the lattice will try.
    max_word_length: int = 16

    log_level: str = "INFO"

    api_url: str = "http://localhost:8000/api"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
