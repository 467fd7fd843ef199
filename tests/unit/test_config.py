"""
Unit tests for settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from adhkar import config
from adhkar.config import AdhkarSettings, configure, get_settings


@pytest.fixture(autouse=True)
def reset_default_settings(monkeypatch):
    monkeypatch.setattr(config, "_default_settings", None)


class TestAdhkarSettings:
    """Test AdhkarSettings defaults, validation and environment overrides."""

    def test_defaults(self):
        """Test default values."""
        settings = AdhkarSettings()
        assert settings.corpus_root == Path("db/by_book")
        assert settings.corpus_base_url is None
        assert settings.request_timeout == 30.0
        assert settings.concurrent_loads is True
        assert settings.max_concurrent_loads == 4
        assert settings.title_max_length == 50
        assert settings.favorites_path is None
        assert settings.log_level == "WARNING"

    def test_environment_override(self, monkeypatch, tmp_path):
        """Test that ADHKAR_ environment variables override defaults."""
        monkeypatch.setenv("ADHKAR_CORPUS_ROOT", str(tmp_path))
        monkeypatch.setenv("ADHKAR_CONCURRENT_LOADS", "false")
        monkeypatch.setenv("ADHKAR_TITLE_MAX_LENGTH", "80")

        settings = AdhkarSettings()
        assert settings.corpus_root == tmp_path
        assert settings.concurrent_loads is False
        assert settings.title_max_length == 80

    @pytest.mark.parametrize("url,expected", [
        ("https://example.org/db/by_book/", "https://example.org/db/by_book"),
        ("https://example.org/db/by_book", "https://example.org/db/by_book"),
        ("  ", None),
    ])
    def test_base_url_normalized(self, url, expected):
        """Test trailing slash and blank handling of the base URL."""
        assert AdhkarSettings(corpus_base_url=url).corpus_base_url == expected

    def test_string_paths_converted(self):
        """Test that string paths become Path objects."""
        settings = AdhkarSettings(corpus_root="corpus", favorites_path="fav.json")
        assert settings.corpus_root == Path("corpus")
        assert settings.favorites_path == Path("fav.json")

    def test_log_level_upper_cased(self):
        assert AdhkarSettings(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("field,value", [
        ("max_concurrent_loads", 0),
        ("max_concurrent_loads", 18),
        ("title_max_length", 3),
        ("request_timeout", 0),
    ])
    def test_out_of_range_rejected(self, field, value):
        """Test range validation."""
        with pytest.raises(ValidationError):
            AdhkarSettings(**{field: value})


class TestDefaultSettings:
    """Test the module-level settings instance."""

    def test_get_settings_is_cached(self):
        """Test that get_settings returns one instance."""
        assert get_settings() is get_settings()

    def test_configure_replaces_default(self):
        """Test that configure installs new defaults."""
        settings = configure(concurrent_loads=False)
        assert get_settings() is settings
        assert get_settings().concurrent_loads is False
