"""Settings for callers that configure the client from the environment."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""

    pass


class Settings(BaseSettings):
    """Client settings loaded from ELEVENLABS_* variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="ELEVENLABS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 120.0

    # Where the demo script writes generated audio
    output_dir: str = "./outputs"

    def require_api_key(self) -> str:
        """Return the API key.

        Raises:
            ConfigurationError: If the key is unset or blank.
        """
        if self.api_key is None or not self.api_key.strip():
            raise ConfigurationError("ELEVENLABS_API_KEY environment variable is required")
        return self.api_key


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
