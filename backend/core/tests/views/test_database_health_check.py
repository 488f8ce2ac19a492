"""Tests for core.views.database_health_check"""
import logging
from unittest.mock import patch

import pytest
from django.db import OperationalError
from django.urls import reverse

URL = reverse("database-health")


@pytest.mark.django_db
class TestGet:
    def test_reports_a_healthy_database(self, api_client):
        response = api_client.get(URL)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["latency_ms"] >= 0
        assert data["connection"]["engine"] == "django.db.backends.sqlite3"

    def test_reports_the_environment_and_ssl_mode(self, api_client, settings):
        settings.ENVIRONMENT = "staging"

        data = api_client.get(URL).json()

        assert data["connection"]["environment"] == "staging"
        assert data["connection"]["ssl_mode"] == "N/A"

    def test_never_shows_connection_credentials(self, api_client):
        data = api_client.get(URL).json()

        assert set(data["connection"]) == {"environment", "engine", "database", "ssl_mode"}

    def test_returns_503_when_the_query_fails(self, api_client):
        with patch("core.views.ping_database", side_effect=OperationalError("connection refused")):
            response = api_client.get(URL)

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["error"] == "connection refused"
        assert data["connection"]["engine"] == "django.db.backends.sqlite3"

    def test_flags_and_logs_a_slow_database(self, api_client, caplog):
        with patch("core.views.ping_database", return_value=150.0):
            with caplog.at_level(logging.WARNING, logger="core.views"):
                response = api_client.get(URL)

        assert response.json()["slow"] is True
        assert "took 150.0ms (threshold 100ms)" in caplog.text

    def test_is_not_slow_below_the_threshold(self, api_client):
        with patch("core.views.ping_database", return_value=99.0):
            response = api_client.get(URL)

        assert response.json()["slow"] is False

    def test_disables_caching(self, api_client):
        response = api_client.get(URL)

        cache_control = response.get("Cache-Control", "").lower()
        assert "no-cache" in cache_control or "no-store" in cache_control or "max-age=0" in cache_control


@pytest.mark.django_db
class TestPost:
    def test_is_not_allowed(self, api_client):
        response = api_client.post(URL)

        assert response.status_code == 405
