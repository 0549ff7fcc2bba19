"""
Configuration management for the Amtraker client.

This module defines the client configuration model and persists it as a
JSON file, creating a default one when none exists.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..version import __api_url__, get_user_agent

logger = logging.getLogger(__name__)


class AmtrakerConfig(BaseModel):
    """
    Configuration for connecting to the Amtraker API.

    Only responsible for connection settings and their validation.
    """

    base_url: str = Field(default=__api_url__, description="API base URL")
    timeout_seconds: int = Field(
        default=10,
        ge=1,
        le=120,
        description="Total request timeout in seconds",
    )
    user_agent: str = Field(
        default_factory=get_user_agent,
        description="User-Agent header sent with each request",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        """Validate base URL scheme and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v):
        """Validate user agent is not empty."""
        if not v.strip():
            raise ValueError("User agent cannot be empty")
        return v.strip()

    def to_summary_dict(self) -> dict:
        """Get configuration summary for display."""
        return {
            "base_url": self.base_url,
            "timeout": f"{self.timeout_seconds} seconds",
            "user_agent": self.user_agent,
        }


class AmtrakerConfigFactory:
    """Factory for creating client configurations."""

    @staticmethod
    def create_default_config() -> AmtrakerConfig:
        """Create default configuration pointing at the public API."""
        return AmtrakerConfig()

    @staticmethod
    def create_custom_config(base_url: str, **kwargs) -> AmtrakerConfig:
        """Create configuration for another endpoint, e.g. a local test server."""
        logger.info(f"Creating custom configuration for {base_url}")
        return AmtrakerConfig(base_url=base_url, **kwargs)


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages client configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                user configuration directory.
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[AmtrakerConfig] = None
        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/Amtraker/config.json
        Elsewhere, uses XDG_CONFIG_HOME/Amtraker/config.json or
        ~/.config/Amtraker/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "Amtraker" / "config.json"
            return Path("config.json")

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            config_dir = Path(xdg_config) / "Amtraker"
        else:
            config_dir = Path.home() / ".config" / "Amtraker"
        return config_dir / "config.json"

    def load_config(self) -> AmtrakerConfig:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            AmtrakerConfig: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(
                f"Config file doesn't exist, creating default at: {self.config_path}"
            )
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = AmtrakerConfig(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")
        except (OSError, TypeError) as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: AmtrakerConfig) -> None:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Raises:
            ConfigurationError: If the file cannot be written
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            raise ConfigurationError(f"Failed to save config: {e}")

        self.config = config

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        self.save_config(AmtrakerConfigFactory.create_default_config())

    def update_base_url(self, base_url: str) -> None:
        """Update the API base URL and persist it."""
        config = self.config or self.load_config()
        try:
            updated = AmtrakerConfig(**{**config.model_dump(), "base_url": base_url})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid base URL: {e}")
        self.save_config(updated)
