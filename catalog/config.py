# catalog/config.py

import logging
import os
from functools import lru_cache

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self) -> None:
        self.DATABASE_URL: str = os.getenv(
            "CATALOG_DATABASE_URL", "sqlite:///catalog.sqlite"
        )
        self.LOG_LEVEL: str = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()
        # create tables on startup
        self.CREATE_SCHEMA: bool = _env_flag("CATALOG_CREATE_SCHEMA", True)
        # expose /test-setup and /test-cleanup
        self.SCHEMA_ROUTES: bool = _env_flag("CATALOG_SCHEMA_ROUTES", True)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
