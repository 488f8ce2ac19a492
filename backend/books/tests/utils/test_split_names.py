"""Tests for books.utils.split_names"""
import pytest

from books.utils import split_names


class TestFunction:
    def test_splits_first_and_last_name(self):
        assert split_names("Ada Lovelace") == ("Ada", "Lovelace")

    def test_puts_middle_names_into_the_last_name(self):
        first, last = split_names("Augusta Ada King Lovelace")

        assert first == "Augusta"
        assert last == "Ada King Lovelace"

    def test_returns_an_empty_last_name_for_a_single_name(self):
        assert split_names("Plato") == ("Plato", "")

    @pytest.mark.parametrize("full_name", ["", "   ", None])
    def test_returns_empty_names_for_blank_input(self, full_name):
        assert split_names(full_name) == ("", "")

    def test_collapses_surrounding_and_repeated_whitespace(self):
        assert split_names("  Charles \t Babbage \n") == ("Charles", "Babbage")
