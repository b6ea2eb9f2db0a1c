"""
Configuration management for Recipe Ideas.

This module centralizes environment variable loading from .env file at project root.
It should be imported early by the Streamlit frontend (streamlit_app/app.py) and by the
sandbox scripts so that .env is loaded before any other code reads environment variables.

On hosted deployments .env will usually not exist; load_dotenv() is safe to call and
will no-op, and platform environment variables are used instead.

Environment Variables:
- MEALDB_BASE_URL: Optional, catalog API base URL (defaults to TheMealDB v1 test key URL)
- MEALDB_TIMEOUT_SECONDS: Optional, per-request timeout (default: 10)
- FAVORITES_STORE_PATH: Optional, JSON file holding persisted favorites (default: favorites.json)
- RESULTS_PAGE_SIZE: Optional, cards per results page (default: 12)
- SEARCH_DEBOUNCE_SECONDS: Optional, quiet period before name-mode auto search (default: 0.45)
- LOG_LEVEL: Optional, root log level (default: INFO)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MEALDB_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_FAVORITES_PATH = "favorites.json"
DEFAULT_PAGE_SIZE = 12
DEFAULT_DEBOUNCE_SECONDS = 0.45
DEFAULT_LOG_LEVEL = "INFO"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is located relative to this file (recipes/config.py -> project root).
    Safe to call multiple times; existing environment variables take precedence.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid value for %s=%r, using default %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Non-positive value for %s=%r, using default %s", name, raw, default)
        return default
    return value


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid value for %s=%r, using default %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Non-positive value for %s=%r, using default %s", name, raw, default)
        return default
    return value


class CatalogConfig:
    """Configuration for the remote recipe catalog connector."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the catalog API base URL.

        Returns:
            Base URL with trailing slash removed (default: TheMealDB v1 with the public test key)
        """
        return os.getenv("MEALDB_BASE_URL", DEFAULT_MEALDB_BASE_URL).rstrip("/")

    @staticmethod
    def get_timeout() -> float:
        """Get the per-request timeout in seconds (default: 10)."""
        return _get_float("MEALDB_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)


class AppConfig:
    """Configuration for the interactive client."""

    @staticmethod
    def get_favorites_path() -> Path:
        """Get the path of the JSON file that persists favorites."""
        return Path(os.getenv("FAVORITES_STORE_PATH", DEFAULT_FAVORITES_PATH))

    @staticmethod
    def get_page_size() -> int:
        """Get the number of result cards per page (default: 12)."""
        return _get_int("RESULTS_PAGE_SIZE", DEFAULT_PAGE_SIZE)

    @staticmethod
    def get_debounce_seconds() -> float:
        """Get the quiet period before a name-mode auto search fires (default: 0.45)."""
        return _get_float("SEARCH_DEBOUNCE_SECONDS", DEFAULT_DEBOUNCE_SECONDS)

    @staticmethod
    def get_log_level() -> str:
        """Get the configured log level name (default: INFO)."""
        return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def configure_logging() -> None:
    """
    Apply LOG_LEVEL to the root logger.

    Uses logging.basicConfig, so only the first call installs a handler.
    """
    level_name = AppConfig.get_log_level()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
