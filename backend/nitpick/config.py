"""Validator configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache

from nitpick import __version__


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Forces the logger to silent on startup
    TESTING: bool = False

    # Reported as PropTypes.version
    PACKAGE_VERSION: str = __version__

    # Logging
    LOG_LEVEL: int = 3
    LOG_PREFIX: str = "@reduct/component"
    DEBUG: bool = False

    model_config = {"env_prefix": "NITPICK_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
