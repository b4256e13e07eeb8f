"""Logging configuration.

Configuration is loaded from environment variables using pydantic-settings.
Only the package's logging is configurable; the sun event calculations
themselves have no options.

## Environment Variables

- SUNEVENT_LOG_LEVEL: Level for the `sunevent` logger (default: WARNING)
- SUNEVENT_DEBUG: Force DEBUG logging (default: false)

## Example .env file

```
SUNEVENT_LOG_LEVEL=DEBUG
```
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER_NAME = "sunevent"


class Settings(BaseSettings):
    """Logging settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUNEVENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @property
    def effective_log_level(self) -> int:
        """Logging level to apply, honouring the debug switch."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger.

    No handlers are installed; the host application decides where
    records go.

    Returns:
        The `sunevent` package logger
    """
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.effective_log_level)
    return logger
