"""Configuration management for the Nylas SDK.

Two kinds of configuration live here:

* ``NylasConfig`` holds the application credentials and API server URL. It is
  created by ``Nylas.configure()`` and handed by reference to every connection
  and auth helper; it is never read from the environment.
* ``Settings`` holds ambient knobs (logging) and can be overridden via
  environment variables or a ``.env`` file.
"""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_SERVER = "https://api.nylas.com"
SUPPORTED_API_VERSION = "2.1"


class NylasConfig(BaseModel):
    """Application credentials shared by every connection of a ``Nylas`` client."""

    client_id: str | None = Field(default=None, description="Nylas application client ID")
    client_secret: str | None = Field(
        default=None,
        description="Nylas application client secret, used for /a/ management paths",
        repr=False,
    )
    api_server: str = Field(
        default=DEFAULT_API_SERVER,
        description="Fully qualified base URL of the Nylas API server",
    )


class Settings(BaseSettings):
    """SDK settings with environment variable support.

    All settings can be overridden via environment variables with
    the NYLAS_SDK_ prefix (e.g., NYLAS_SDK_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="NYLAS_SDK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached SDK settings.

    Returns:
        Settings: SDK settings instance.
    """
    return Settings()
