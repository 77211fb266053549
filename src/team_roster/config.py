"""Application configuration via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging (DEBUG wins over LOG_LEVEL)
    debug: bool = False
    log_level: str = "INFO"

    # CORS - comma-separated origins (env var: CORS_ORIGINS)
    cors_origins: str = "http://localhost:8081,http://127.0.0.1:8081"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Storage substrate: "memory" (volatile) or "duckdb" (file-backed)
    storage_backend: Literal["memory", "duckdb"] = "duckdb"
    database_path: str = "data/team_roster.duckdb"

    # Namespace for every key written to the substrate
    key_prefix: str = "@team-roster"

    # Serialize read-modify-write cycles per key within this process
    serialize_writes: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
