"""
Library configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Library configuration from environment variables.

    All settings can be overridden via environment variables prefixed with
    ``DIGEST_HASHER_`` (e.g. ``DIGEST_HASHER_LOG_LEVEL=DEBUG``).
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Salt generation
    default_salt_bytes: int = Field(default=8, gt=0)  # Used when no size is given

    model_config = {
        "env_prefix": "DIGEST_HASHER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
