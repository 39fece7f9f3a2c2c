"""
Tests for the researchexport settings module.
"""

import pytest
from pydantic import ValidationError

from researchexport.settings import DEFAULT_BASE_URL, Settings


class TestSettings:
    """Test cases for the Settings class."""

    def test_default_settings(self):
        settings = Settings()

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.request_timeout == 300
        assert settings.max_workers is None
        assert settings.check_status is True
        assert settings.default_sink == "console"
        assert settings.json_indent is None
        assert settings.log_level == "INFO"

    def test_output_dir_defaults_under_root(self, temp_dir):
        settings = Settings(root_dir=temp_dir)

        assert settings.output_dir == temp_dir / "exports"

    def test_custom_settings(self, temp_dir):
        settings = Settings(
            root_dir=temp_dir,
            output_dir=temp_dir / "elsewhere",
            max_workers=3,
            check_status=False,
            log_level="DEBUG",
        )

        assert settings.output_dir == temp_dir / "elsewhere"
        assert settings.max_workers == 3
        assert settings.check_status is False
        assert settings.log_level == "DEBUG"

    def test_directory_creation(self, temp_dir):
        settings = Settings(root_dir=temp_dir)
        settings.create_directories()

        assert settings.output_dir.exists()

    def test_max_workers_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(max_workers=0)

    def test_environment_variable_override(self, temp_dir, monkeypatch):
        monkeypatch.setenv("RESEARCHEXPORT_MAX_WORKERS", "4")
        monkeypatch.setenv("RESEARCHEXPORT_BASE_URL", "https://mirror.example.org/")
        monkeypatch.setenv("RESEARCHEXPORT_CHECK_STATUS", "false")

        settings = Settings(root_dir=temp_dir)

        assert settings.max_workers == 4
        assert settings.base_url == "https://mirror.example.org/"
        assert settings.check_status is False
