"""
Tests for AmtrakerConfig and ConfigManager.

Covers defaults, validators, the factory and JSON file persistence.
"""

import json

import pytest
from pydantic import ValidationError

from amtraker.managers.config_manager import (
    AmtrakerConfig,
    AmtrakerConfigFactory,
    ConfigManager,
    ConfigurationError,
)


class TestAmtrakerConfig:
    """Test cases for AmtrakerConfig."""

    def test_default_initialization(self):
        """Test default configuration targets the public API."""
        config = AmtrakerConfig()

        assert config.base_url == "https://api-v3.amtraker.com/v3"
        assert config.timeout_seconds == 10
        assert config.user_agent.startswith("Amtraker/")

    def test_base_url_trailing_slash_removed(self):
        """Test trailing slashes are dropped from the base URL."""
        config = AmtrakerConfig(base_url=" http://localhost:8080/v3/ ")

        assert config.base_url == "http://localhost:8080/v3"

    def test_base_url_requires_http_scheme(self):
        """Test non-HTTP base URLs are rejected."""
        with pytest.raises(ValidationError):
            AmtrakerConfig(base_url="ftp://example.com")

    @pytest.mark.parametrize("timeout", [0, 121])
    def test_timeout_bounds(self, timeout):
        """Test timeout range validation."""
        with pytest.raises(ValidationError):
            AmtrakerConfig(timeout_seconds=timeout)

    def test_empty_user_agent_rejected(self):
        """Test blank user agents are rejected."""
        with pytest.raises(ValidationError):
            AmtrakerConfig(user_agent="   ")

    def test_to_summary_dict(self):
        """Test configuration summary."""
        summary = AmtrakerConfig(timeout_seconds=20).to_summary_dict()

        assert summary["base_url"] == "https://api-v3.amtraker.com/v3"
        assert summary["timeout"] == "20 seconds"


class TestAmtrakerConfigFactory:
    """Test cases for AmtrakerConfigFactory."""

    def test_create_default_config(self):
        assert AmtrakerConfigFactory.create_default_config() == AmtrakerConfig()

    def test_create_custom_config(self):
        config = AmtrakerConfigFactory.create_custom_config(
            "http://127.0.0.1:9000", timeout_seconds=5
        )

        assert config.base_url == "http://127.0.0.1:9000"
        assert config.timeout_seconds == 5


class TestConfigManager:
    """Test cases for ConfigManager persistence."""

    def test_load_creates_default_file(self, tmp_path):
        """Test a missing file is created with defaults."""
        path = tmp_path / "nested" / "config.json"
        manager = ConfigManager(str(path))

        config = manager.load_config()

        assert path.exists()
        assert config == AmtrakerConfig()
        assert manager.config == config

    def test_load_existing_file(self, tmp_path):
        """Test loading a saved configuration."""
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"base_url": "http://localhost:1234", "timeout_seconds": 3}),
            encoding="utf-8",
        )

        config = ConfigManager(str(path)).load_config()

        assert config.base_url == "http://localhost:1234"
        assert config.timeout_seconds == 3

    def test_load_invalid_json(self, tmp_path):
        """Test invalid JSON raises ConfigurationError."""
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigManager(str(path)).load_config()

    def test_load_invalid_values(self, tmp_path):
        """Test invalid values raise ConfigurationError."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"timeout_seconds": 999}), encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigManager(str(path)).load_config()

    def test_save_and_reload(self, tmp_path):
        """Test saved configuration round trips through the file."""
        path = tmp_path / "config.json"
        manager = ConfigManager(str(path))
        config = AmtrakerConfig(base_url="http://localhost:5000", user_agent="Test/1.0")

        manager.save_config(config)

        assert ConfigManager(str(path)).load_config() == config

    def test_update_base_url(self, tmp_path):
        """Test updating the base URL persists it."""
        path = tmp_path / "config.json"
        manager = ConfigManager(str(path))

        manager.update_base_url("http://localhost:7000/")

        assert ConfigManager(str(path)).load_config().base_url == "http://localhost:7000"

    def test_update_base_url_invalid(self, tmp_path):
        """Test an invalid base URL is rejected and not saved."""
        path = tmp_path / "config.json"
        manager = ConfigManager(str(path))

        with pytest.raises(ConfigurationError):
            manager.update_base_url("not a url")

        assert ConfigManager(str(path)).load_config() == AmtrakerConfig()

    def test_default_config_path_xdg(self, monkeypatch, tmp_path):
        """Test XDG_CONFIG_HOME is honoured on non-Windows systems."""
        monkeypatch.setattr("amtraker.managers.config_manager.os.name", "posix")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        path = ConfigManager.get_default_config_path()

        assert path == tmp_path / "Amtraker" / "config.json"
