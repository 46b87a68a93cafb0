"""
Configuration management for CampusCoffee.

Loads configuration from an optional JSON file and overlays the
environment, falling back to sensible defaults.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

STORAGE_BACKENDS = ("memory", "sqlalchemy")


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


@dataclass
class DatabaseConfig:
    """Database configuration."""

    url: str = "sqlite:///campuscoffee.db"
    echo: bool = False
    log_queries: bool = False  # Enable query timing logs


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False


@dataclass
class AppConfig:
    """Main application configuration."""

    app_name: str = "CampusCoffee"
    description: str = "Points of sale and users on campus"

    # Storage backend behind the data services: "memory" or "sqlalchemy"
    storage: str = "sqlalchemy"

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = True
    log_dir: str = "logs"


@dataclass
class CampusCoffeeConfig:
    """Complete configuration for CampusCoffee."""

    app: AppConfig
    server: ServerConfig
    database: DatabaseConfig

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "app": asdict(self.app),
            "server": asdict(self.server),
            "database": asdict(self.database),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CampusCoffeeConfig":
        """Create from dictionary."""
        return cls(
            app=AppConfig(**data.get("app", {})),
            server=ServerConfig(**data.get("server", {})),
            database=DatabaseConfig(**data.get("database", {})),
        )


class ConfigManager:
    """Manages configuration loading, saving and environment overrides."""

    def __init__(self):
        self.config_file: Optional[Path] = None
        self.config: Optional[CampusCoffeeConfig] = None

    def get_config_file_path(self) -> Path:
        """Get the path for the config file."""
        config_file = os.getenv("CAMPUSCOFFEE_CONFIG_FILE")
        if config_file:
            return Path(config_file)
        return Path.cwd() / "data" / "config.json"

    def apply_environment(self, config: CampusCoffeeConfig) -> CampusCoffeeConfig:
        """Overlay environment variables onto a configuration."""
        db_url = os.getenv("CAMPUSCOFFEE_DATABASE_URL")
        if db_url:
            config.database.url = db_url

        storage = os.getenv("CAMPUSCOFFEE_STORAGE")
        if storage:
            config.app.storage = storage.lower()

        log_dir = os.getenv("CAMPUSCOFFEE_LOG_DIR")
        if log_dir:
            config.app.log_dir = log_dir

        config.app.log_to_file = _env_flag(
            "CAMPUSCOFFEE_LOG_TO_FILE", config.app.log_to_file
        )

        if _env_flag("CAMPUSCOFFEE_DEBUG"):
            config.server.debug = True
            config.app.log_level = "DEBUG"

        return config

    def load_config(self) -> CampusCoffeeConfig:
        """Load configuration from file or create default."""
        if self.config is not None:
            return self.config

        self.config_file = self.get_config_file_path()

        config = None
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    config = CampusCoffeeConfig.from_dict(json.load(f))
                logging.info(f"Loaded configuration from {self.config_file}")
            except (OSError, ValueError, TypeError) as e:
                logging.warning(f"Failed to load config from {self.config_file}: {e}")

        if config is None:
            config = CampusCoffeeConfig(
                app=AppConfig(), server=ServerConfig(), database=DatabaseConfig()
            )

        self.config = self.apply_environment(config)
        return self.config

    def validate_config(self) -> List[str]:
        """Validate configuration and return list of issues."""
        config = self.load_config()
        issues = []

        if config.app.storage not in STORAGE_BACKENDS:
            issues.append(
                f"Unknown storage backend '{config.app.storage}', "
                f"expected one of {', '.join(STORAGE_BACKENDS)}"
            )

        if config.database.url.startswith("sqlite:///"):
            db_path = Path(config.database.url.replace("sqlite:///", ""))
            db_dir = db_path.parent
            if db_dir.exists() and not os.access(db_dir, os.W_OK):
                issues.append(f"Database directory is not writable: {db_dir}")

        return issues

    def reset(self) -> None:
        """Drop the cached configuration."""
        self.config = None
        self.config_file = None


# Global config manager instance
config_manager = ConfigManager()


def get_config() -> CampusCoffeeConfig:
    """Get the current configuration."""
    return config_manager.load_config()


def reset_config() -> None:
    """Forget the loaded configuration so the next access reloads it."""
    config_manager.reset()
