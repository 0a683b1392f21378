#!/usr/bin/env python3
"""
Configuration Management for the Expense Tracker

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production); the backing
store and export filenames are fixed, only their directory is configurable.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

STORAGE_FILENAME = "expenses.csv"
EXPORT_FILENAME = "expenses.json"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for the expense tracker.

    Loads configuration from environment variables with defaults that keep
    the tool's files in the current working directory.
    """

    environment: Environment
    data_dir: Path

    # Application settings
    debug: bool = False
    log_level: str = "WARNING"

    @property
    def storage_file(self) -> Path:
        """Path of the CSV backing store."""
        return self.data_dir / STORAGE_FILENAME

    @property
    def export_file(self) -> Path:
        """Path of the JSON export document."""
        return self.data_dir / EXPORT_FILENAME

    @classmethod
    def from_environment(cls) -> "Config":
        """
        Create configuration from environment variables.

        Raises:
            ValueError: If the data directory cannot be created
        """
        env = Environment(os.getenv("ETRACKER_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_etracker"
            data_dir = Path(os.getenv("ETRACKER_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("ETRACKER_DATA_DIR", ".")).expanduser().resolve()

        try:
            data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ValueError(f"Cannot create data_dir {data_dir}: {e}") from e

        debug = os.getenv("DEBUG", "false").lower() == "true"
        default_level = "DEBUG" if debug else "WARNING"

        return cls(
            environment=env,
            data_dir=data_dir,
            debug=debug,
            log_level=os.getenv("LOG_LEVEL", default_level).upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")
        elif not self.data_dir.is_dir():
            errors.append(f"data_dir is not a directory: {self.data_dir}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.WARNING)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")
        logging.getLogger("etracker").setLevel(level)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        return {
            "environment": self.environment.value,
            "data_dir": str(self.data_dir),
            "storage_file": str(self.storage_file),
            "export_file": str(self.export_file),
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()

