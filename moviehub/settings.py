# moviehub/settings.py

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ---- server ----
    host: str = "0.0.0.0"
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("APP_PORT", "PORT"),
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- upstream (PokeAPI) ----
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    pokemon_limit: int = 100000
    pokemon_offset: int = 0
    upstream_timeout_seconds: Optional[float] = None  # None disables the timeout

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",  # APP_PORT, APP_LOG_LEVEL, ...
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, parsed once."""
    return Settings()
