"""
Configuration management for the recipe browser.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early by the Streamlit entry point so .env
is loaded before any other code reads the environment.

In deployments without a .env file, load_dotenv() is a no-op and platform
environment variables are used instead.

Environment Variables:
- RECIPES_API_URL: Optional, recipe service base URL (default: http://localhost:3000)
- RECIPES_API_TIMEOUT: Optional, request timeout in seconds (default: 10)
- RECIPES_PAGE_SIZE: Optional, recipes per page (default: 20)
- SEARCH_DEBOUNCE_MS: Optional, search input debounce window (default: 300)
- LOG_LEVEL: Optional, root logging level (default: INFO)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_PAGE_SIZE = 20
DEFAULT_SEARCH_DEBOUNCE_MS = 300
DEFAULT_LOG_LEVEL = "INFO"


def load_env_file() -> None:
    """
    Load environment variables from .env at the project root.

    Safe to call multiple times. Existing environment variables take
    precedence over values from the file.
    """
    # recipe_browser/config.py -> recipe_browser/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env on module import
load_env_file()


def _get_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}, using default {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} must be positive, got {raw!r}, using default {default}")
        return default
    return value


class RecipeApiConfig:
    """Configuration for the recipe service client."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get the recipe service base URL.

        Returns:
            URL string with trailing slash removed
        """
        return os.getenv("RECIPES_API_URL", DEFAULT_API_URL).rstrip("/")

    @staticmethod
    def get_timeout() -> float:
        return _get_number("RECIPES_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS, float)

    @staticmethod
    def get_page_size() -> int:
        return _get_number("RECIPES_PAGE_SIZE", DEFAULT_PAGE_SIZE, int)


class FilterUiConfig:
    """Configuration for the filter controls."""

    @staticmethod
    def get_search_debounce_ms() -> int:
        """
        Get the quiet window applied to search input before it updates filters.

        Returns:
            Milliseconds (default: 300)
        """
        return _get_number("SEARCH_DEBOUNCE_MS", DEFAULT_SEARCH_DEBOUNCE_MS, int)


def get_log_level() -> int:
    name = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL. Handlers already installed are kept."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(get_log_level())
