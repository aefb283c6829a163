"""
Tests for service configuration loading.
"""

import pytest
from pydantic import ValidationError

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from service_markers.app.main import MarkersService
from shared.config import get_config
from shared.errors import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables inherited from the test environment."""
    for name in ("API_KEY", "PORT", "HOST", "LOG_LEVEL", "ACCESS_ENV", "MARKER_SEED"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:
    """Test cases for get_config."""

    def test_defaults(self, clean_env):
        clean_env.setenv("API_KEY", "env-secret")

        config = get_config(_env_file=None)

        assert config.api_key == "env-secret"
        assert config.port == 3001
        assert config.host == "0.0.0.0"
        assert config.marker_seed is None

    def test_port_from_environment(self, clean_env):
        clean_env.setenv("API_KEY", "env-secret")
        clean_env.setenv("PORT", "8080")

        assert get_config(_env_file=None).port == 8080

    def test_missing_api_key(self, clean_env):
        """An unset API_KEY fails loudly instead of accepting empty tokens."""
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(_env_file=None)

        assert "api_key" in exc_info.value.details["fields"]

    def test_blank_api_key(self, clean_env):
        clean_env.setenv("API_KEY", "   ")

        with pytest.raises(ConfigurationError):
            get_config(_env_file=None)

    def test_config_is_immutable(self, clean_env):
        config = get_config(api_key="injected", _env_file=None)

        with pytest.raises(ValidationError):
            config.api_key = "changed"

    def test_service_fails_at_startup_without_api_key(self, clean_env, tmp_path):
        """The service refuses to start without a secret."""
        clean_env.chdir(tmp_path)

        with pytest.raises(ConfigurationError):
            MarkersService()
