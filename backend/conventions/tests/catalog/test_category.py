"""Tests for conventions.catalog.Category"""
import pytest

from conventions.catalog import Category


class TestParse:
    def test_ignores_case_and_whitespace(self):
        assert Category.parse(" Naming ") is Category.NAMING

    def test_lists_valid_categories_for_an_unknown_name(self):
        with pytest.raises(ValueError, match="layout, naming, settings, testing"):
            Category.parse("style")

    def test_raises_value_error_for_a_non_string(self):
        with pytest.raises(ValueError, match="Invalid category None"):
            Category.parse(None)
