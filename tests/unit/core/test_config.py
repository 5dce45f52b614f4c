import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from schemacraft.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    get_settings.cache_clear()

    settings = Settings()

    assert settings.environment == "development"
    assert settings.log_level == "INFO"
    assert settings.render_indent == 2
    assert settings.strict_primary_key is False
    assert settings.is_development is True


def test_settings_env_override():
    """Test that environment variables override defaults."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {
        "SCHEMACRAFT_ENVIRONMENT": "production",
        "SCHEMACRAFT_LOG_LEVEL": "debug",
        "SCHEMACRAFT_RENDER_INDENT": "4",
        "SCHEMACRAFT_STRICT_PRIMARY_KEY": "true",
    }):
        settings = Settings()

        assert settings.environment == "production"
        assert settings.log_level == "DEBUG"
        assert settings.render_indent == 4
        assert settings.strict_primary_key is True
        assert settings.is_development is False


def test_negative_indent_rejected():
    with pytest.raises(ValidationError):
        Settings(render_indent=-1)


def test_invalid_environment_rejected():
    with pytest.raises(ValidationError):
        Settings(environment="staging")


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
