"""
Tests for environment-based configuration.

These tests verify that:
- Defaults apply when variables are unset
- Valid overrides are used
- Invalid or non-positive numbers fall back to defaults
"""

import logging
import os
from pathlib import Path
from unittest.mock import patch

from recipes.config import AppConfig, CatalogConfig, configure_logging


class TestCatalogConfig:
    """Tests for CatalogConfig."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        """Test the public catalog URL and timeout defaults."""
        assert CatalogConfig.get_base_url() == "https://www.themealdb.com/api/json/v1/1"
        assert CatalogConfig.get_timeout() == 10.0

    @patch.dict(os.environ, {"MEALDB_TIMEOUT_SECONDS": "-1"})
    def test_non_positive_timeout_uses_default(self):
        """Test a non-positive timeout is rejected."""
        assert CatalogConfig.get_timeout() == 10.0


class TestAppConfig:
    """Tests for AppConfig."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        """Test client defaults."""
        assert AppConfig.get_favorites_path() == Path("favorites.json")
        assert AppConfig.get_page_size() == 12
        assert AppConfig.get_debounce_seconds() == 0.45
        assert AppConfig.get_log_level() == "INFO"

    @patch.dict(os.environ, {
        "FAVORITES_STORE_PATH": "/tmp/favs.json",
        "RESULTS_PAGE_SIZE": "24",
        "SEARCH_DEBOUNCE_SECONDS": "0.2",
        "LOG_LEVEL": "debug",
    })
    def test_overrides(self):
        """Test env vars override the defaults."""
        assert AppConfig.get_favorites_path() == Path("/tmp/favs.json")
        assert AppConfig.get_page_size() == 24
        assert AppConfig.get_debounce_seconds() == 0.2
        assert AppConfig.get_log_level() == "DEBUG"

    @patch.dict(os.environ, {"RESULTS_PAGE_SIZE": "twelve"})
    def test_invalid_page_size_uses_default(self):
        """Test an unparsable page size is rejected."""
        assert AppConfig.get_page_size() == 12

    @patch.dict(os.environ, {"LOG_LEVEL": "WARNING"})
    def test_configure_logging_sets_root_level(self):
        """Test configure_logging applies LOG_LEVEL to the root logger."""
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging()
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)
