"""Tests for core.environment.get_secret"""
from core.environment import get_secret


class TestFunction:
    def test_returns_the_value_unstripped(self, monkeypatch):
        monkeypatch.setenv("BOOKS_SECRET", "  s3cret ")

        assert get_secret("BOOKS_SECRET") == "  s3cret "

    def test_returns_the_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("BOOKS_SECRET", raising=False)

        assert get_secret("BOOKS_SECRET", "fallback") == "fallback"

    def test_treats_an_empty_value_as_unset(self, monkeypatch):
        monkeypatch.setenv("BOOKS_SECRET", "")

        assert get_secret("BOOKS_SECRET") is None
