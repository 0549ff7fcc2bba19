"""
Managers for the Amtraker client.

Currently holds configuration loading and persistence.
"""

from .config_manager import (
    AmtrakerConfig,
    AmtrakerConfigFactory,
    ConfigManager,
    ConfigurationError,
)

__all__ = [
    "AmtrakerConfig",
    "AmtrakerConfigFactory",
    "ConfigManager",
    "ConfigurationError",
]
