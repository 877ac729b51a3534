"""
Application settings and logging setup.

Settings are read from environment variables (prefixed with CHESS_) so that the database can be swapped
without touching the code. Defaults keep everything in memory.
"""

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Self

DEFAULT_DATABASE_URL = "sqlite:///:memory:"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# all loggers of this application live under the top-level package name
ROOT_LOGGER_NAME = "src"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    db_echo: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Self:
        return cls(
            database_url=os.environ.get("CHESS_DATABASE_URL", DEFAULT_DATABASE_URL),
            db_echo=os.environ.get("CHESS_DB_ECHO", "").strip().lower() in TRUTHY,
            log_level=os.environ.get("CHESS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    @property
    def is_in_memory_db(self) -> bool:
        return self.database_url.startswith("sqlite") and ":memory:" in self.database_url


@lru_cache
def get_settings() -> Settings:
    """One Settings instance per process (call get_settings.cache_clear() in tests to re-read the env)"""
    return Settings.from_env()


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """
    Attach a single stream handler to the application's root logger.

    Calling it again only updates the level (no duplicate handlers).
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(log_level)
    return logger
