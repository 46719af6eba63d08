"""
Test cases for the configuration management system.
Tests config loading, environment overrides, and access functionality.
"""

import os
import json
from datetime import datetime, timedelta
from unittest.mock import patch
import pytest

from config_manager import (
    ConfigManager,
    AppConfig,
    PathsConfig,
    StatsConfig,
    get_app_config,
    get_paths_config,
    get_stats_config
)


@pytest.fixture
def config_file(tmp_path):
    """Path of a config file inside a temporary directory."""
    return tmp_path / "web_app_config.json"


class TestConfigManager:
    """Test the ConfigManager class functionality."""

    def test_defaults_without_file(self, config_file):
        """Test that defaults load when the config file is missing."""
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))

        assert manager.get_app_config().port == 22581
        assert manager.get_paths_config().data_dir == "analytics_data"
        stats_config = manager.get_stats_config()
        assert stats_config.timezone == ""
        assert stats_config.default_period == "overall"
        assert stats_config.store_file == "visits.json"

    def test_load_config_from_file(self, config_file):
        """Test that file values merge over defaults section by section."""
        config_file.write_text(json.dumps({
            "app": {"port": 8080},
            "stats": {"timezone": "Europe/Berlin"}
        }), encoding='utf-8')

        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))

        assert manager.get_app_config().port == 8080
        assert manager.get_app_config().host == "0.0.0.0"
        assert manager.get_stats_config().timezone == "Europe/Berlin"
        assert manager.get_stats_config().default_period == "overall"

    def test_invalid_file_keeps_defaults(self, config_file):
        """Test that an unparsable config file is ignored."""
        config_file.write_text("{broken", encoding='utf-8')
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))
        assert manager.get_app_config().port == 22581

    def test_override_with_env_variables(self, config_file):
        """Test that environment variables override config file values."""
        config_file.write_text(json.dumps({"app": {"host": "127.0.0.1"}}), encoding='utf-8')
        env_vars = {
            "APP_HOST": "localhost",
            "APP_PORT": "9000",
            "APP_DEBUG": "true",
            "DATA_DIR": "/var/lib/analytics",
            "STATS_TIMEZONE": "UTC",
            "STATS_DEFAULT_PERIOD": "week",
            "STATS_STORE_FILE": "hits.json"
        }

        with patch.dict(os.environ, env_vars, clear=True):
            manager = ConfigManager(str(config_file))

        app_config = manager.get_app_config()
        assert app_config.host == "localhost"
        assert app_config.port == 9000
        assert app_config.debug is True
        assert manager.get_paths_config().data_dir == "/var/lib/analytics"
        stats_config = manager.get_stats_config()
        assert stats_config.timezone == "UTC"
        assert stats_config.default_period == "week"
        assert stats_config.store_file == "hits.json"

    def test_invalid_env_port(self, config_file):
        """Test that a non-numeric port is a startup error."""
        with patch.dict(os.environ, {"APP_PORT": "eighty"}, clear=True):
            with pytest.raises(ValueError):
                ConfigManager(str(config_file))

    def test_get_config_is_copy(self, config_file):
        """Test getting raw configuration dictionary."""
        manager = ConfigManager(str(config_file))
        config = manager.get_config()
        assert config == manager._config
        assert config is not manager._config

    def test_save_and_reload(self, config_file):
        """Test saving configuration to file and reloading it."""
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))
            manager._config["stats"]["default_period"] = "month"
            manager.save_config()

            saved = json.loads(config_file.read_text(encoding='utf-8'))
            assert saved["stats"]["default_period"] == "month"

            manager._config["stats"]["default_period"] = "day"
            manager.reload()
            assert manager.get_stats_config().default_period == "month"


class TestStatsConfig:
    """Test the statistics configuration data class."""

    def test_local_timezone(self):
        """Test that an empty timezone means server local time."""
        config = StatsConfig(timezone="", default_period="overall", store_file="visits.json")
        assert config.get_tzinfo() is None

    def test_named_timezone(self):
        """Test that IANA names resolve to tzinfo objects."""
        config = StatsConfig(timezone="UTC", default_period="overall", store_file="visits.json")
        tz = config.get_tzinfo()
        assert tz is not None
        assert datetime(2025, 1, 1, tzinfo=tz).utcoffset() == timedelta(0)

    def test_unknown_timezone(self):
        """Test that an unknown IANA name is a ValueError naming the zone."""
        config = StatsConfig(timezone="Mars/Olympus_Mons", default_period="overall", store_file="visits.json")
        with pytest.raises(ValueError, match="Mars/Olympus_Mons"):
            config.get_tzinfo()

    def test_unknown_env_timezone_fails_startup(self, config_file, tmp_path):
        """Test that a bad STATS_TIMEZONE stops app creation."""
        from app.main import create_app

        with patch.dict(os.environ, {"STATS_TIMEZONE": "Nowhere/Special"}, clear=True):
            manager = ConfigManager(str(config_file))
        with pytest.raises(ValueError, match="Nowhere/Special"):
            create_app(manager, data_dir=tmp_path / "data")


class TestGlobalFunctions:
    """Test the global configuration functions."""

    def test_global_getters(self):
        """Test global getters return the dataclasses."""
        assert isinstance(get_app_config(), AppConfig)
        assert isinstance(get_paths_config(), PathsConfig)
        assert isinstance(get_stats_config(), StatsConfig)
