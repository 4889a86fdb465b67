"""Tests for the catalog settings.

These tests cover default values, environment loading, validation and the
cached singleton.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from library_catalog.config import CatalogConfig, get_config, reset_config


@pytest.mark.usefixtures("clean_env")
class TestCatalogConfig:
    """Test settings behavior."""

    def test_default_configuration(self):
        config = CatalogConfig(_env_file=None)

        assert config.log_level == "WARNING"
        assert config.debug is False
        assert config.effective_log_level == "WARNING"

    def test_environment_variable_loading(self):
        env_vars = {
            "LIBRARY_CATALOG_LOG_LEVEL": "INFO",
            "LIBRARY_CATALOG_DEBUG": "true",
        }

        with patch.dict(os.environ, env_vars):
            config = CatalogConfig(_env_file=None)

            assert config.log_level == "INFO"
            assert config.debug is True

    def test_log_level_is_case_insensitive(self):
        with patch.dict(os.environ, {"LIBRARY_CATALOG_LOG_LEVEL": "debug"}):
            assert CatalogConfig(_env_file=None).log_level == "DEBUG"

    def test_log_level_validation(self):
        for level in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            assert CatalogConfig(_env_file=None, log_level=level).log_level == level

        for level in ["TRACE", "CRITICAL", "verbose", ""]:
            with pytest.raises(ValidationError):
                CatalogConfig(_env_file=None, log_level=level)

    def test_debug_overrides_log_level(self):
        config = CatalogConfig(_env_file=None, log_level="ERROR", debug=True)

        assert config.effective_log_level == "DEBUG"

    def test_env_file_loading(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("LIBRARY_CATALOG_LOG_LEVEL=ERROR\n", encoding="utf-8")

        config = CatalogConfig(_env_file=env_file)

        assert config.log_level == "ERROR"


@pytest.mark.usefixtures("clean_env")
class TestConfigSingleton:
    """Test the cached configuration instance."""

    def test_get_config_returns_same_instance(self):
        assert get_config() is get_config()

    def test_reset_config_rereads_environment(self):
        first = get_config()

        with patch.dict(os.environ, {"LIBRARY_CATALOG_LOG_LEVEL": "ERROR"}):
            reset_config()
            second = get_config()

        assert second is not first
        assert second.log_level == "ERROR"
