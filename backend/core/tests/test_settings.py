"""Tests for core.settings"""
import runpy
from pathlib import Path

import pytest
from django.core.exceptions import ImproperlyConfigured

SETTINGS_PATH = Path(__file__).resolve().parents[1] / "settings.py"


@pytest.fixture
def load_settings(monkeypatch):
    """
    Execute core.settings in a fresh namespace with the given variables

    The configured django.conf.settings are left untouched. Blank values
    count as unset and are not replaced from backend/.env.
    """

    def load(**variables):
        defaults = {"ENVIRONMENT": "development", "SECRET_KEY": "", "LOG_FILE": "", "DB_ENGINE": ""}
        for name, value in {**defaults, **variables}.items():
            monkeypatch.setenv(name, value)
        return runpy.run_path(str(SETTINGS_PATH), run_name="settings_under_test")

    return load


class TestEnvironment:
    def test_rejects_an_unknown_environment(self, load_settings):
        with pytest.raises(ImproperlyConfigured, match="ENVIRONMENT must be one of"):
            load_settings(ENVIRONMENT="qa")

    def test_uses_the_test_database_for_the_test_environment(self, load_settings):
        namespace = load_settings(ENVIRONMENT="test")

        assert namespace["DATABASES"]["default"]["NAME"] == ":memory:"
        assert namespace["PASSWORD_HASHERS"] == ["django.contrib.auth.hashers.MD5PasswordHasher"]


class TestSecretKey:
    def test_is_required_in_production(self, load_settings):
        with pytest.raises(ImproperlyConfigured, match="SECRET_KEY must be set in production"):
            load_settings(ENVIRONMENT="production")

    def test_falls_back_to_an_insecure_key_outside_production(self, load_settings):
        namespace = load_settings()

        assert namespace["SECRET_KEY"].startswith("django-insecure-")

    def test_is_read_from_the_environment(self, load_settings):
        namespace = load_settings(SECRET_KEY="s3cret")

        assert namespace["SECRET_KEY"] == "s3cret"


class TestLogging:
    def test_adds_a_file_handler_when_log_file_is_set(self, load_settings, tmp_path):
        log_file = tmp_path / "logs" / "books.log"

        namespace = load_settings(LOG_FILE=str(log_file))

        handler = namespace["LOGGING"]["handlers"]["file"]
        assert handler["filename"] == str(log_file)
        assert handler["formatter"] == "verbose"
        assert "file" in namespace["LOGGING"]["root"]["handlers"]
        assert log_file.parent.is_dir()

    def test_logs_to_the_console_only_without_log_file(self, load_settings):
        namespace = load_settings()

        assert "file" not in namespace["LOGGING"]["handlers"]
        assert namespace["LOGGING"]["root"]["handlers"] == ["console"]
