"""
Configuration management for the Visit Analytics service.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
from datetime import tzinfo
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool


@dataclass
class PathsConfig:
    """Path configuration settings."""
    data_dir: str


@dataclass
class StatsConfig:
    """Statistics configuration settings."""
    timezone: str
    default_period: str
    store_file: str

    def get_tzinfo(self) -> Optional[tzinfo]:
        """Resolve the configured timezone; None means server local time.

        Raises:
            ValueError: If the name is not a known IANA timezone
        """
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except ZoneInfoNotFoundError:
            raise ValueError(f"Unknown timezone '{self.timezone}' in stats.timezone / STATS_TIMEZONE") from None


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "web_app_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        # Start with default config
        self._config = self._get_default_config()

        # Load base config from file
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        # Override with environment variables
        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 22581,
                "debug": False
            },
            "paths": {
                "data_dir": "analytics_data"
            },
            "stats": {
                "timezone": "",
                "default_period": "overall",
                "store_file": "visits.json"
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config:
                if isinstance(values, dict):
                    self._config[section].update(values)
                else:
                    self._config[section] = values
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        # App settings
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = os.getenv("APP_DEBUG").lower() == "true"

        # Path settings
        if os.getenv("DATA_DIR"):
            self._config["paths"]["data_dir"] = os.getenv("DATA_DIR")

        # Stats settings
        if os.getenv("STATS_TIMEZONE"):
            self._config["stats"]["timezone"] = os.getenv("STATS_TIMEZONE")

        if os.getenv("STATS_DEFAULT_PERIOD"):
            self._config["stats"]["default_period"] = os.getenv("STATS_DEFAULT_PERIOD")

        if os.getenv("STATS_STORE_FILE"):
            self._config["stats"]["store_file"] = os.getenv("STATS_STORE_FILE")

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"]
        )

    def get_paths_config(self) -> PathsConfig:
        """Get paths configuration."""
        paths_config = self._config["paths"]
        return PathsConfig(
            data_dir=paths_config["data_dir"]
        )

    def get_stats_config(self) -> StatsConfig:
        """Get statistics configuration."""
        stats_config = self._config["stats"]
        return StatsConfig(
            timezone=stats_config["timezone"],
            default_period=stats_config["default_period"],
            store_file=stats_config["store_file"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)


# Global configuration instance
config_manager = ConfigManager()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return config_manager.get_app_config()


def get_paths_config() -> PathsConfig:
    """Get paths configuration."""
    return config_manager.get_paths_config()


def get_stats_config() -> StatsConfig:
    """Get statistics configuration."""
    return config_manager.get_stats_config()


def reload_config() -> None:
    """Reload configuration."""
    config_manager.reload()


def save_config() -> None:
    """Save configuration to file."""
    config_manager.save_config()
