"""Tests for books.filters.PublishedFilter"""
import datetime

import pytest
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from books.filters import PublishedFilter
from books.models import Book


def filtered(query_string):
    request = Request(APIRequestFactory().get(f"/api/books/{query_string}"))
    return PublishedFilter().filter_queryset(request, Book.objects.all(), view=None)


@pytest.fixture
def draft(user):
    return Book.objects.create(title="Draft", author="A", isbn="2000000001", owner=user)


@pytest.mark.django_db
class TestFilterQueryset:
    def test_keeps_only_published_books_for_true(self, book, draft):
        assert list(filtered("?published=true")) == [book]

    def test_keeps_only_unpublished_books_for_false(self, book, draft):
        assert list(filtered("?published=no")) == [draft]

    def test_ignores_an_invalid_value(self, book, draft):
        assert filtered("?published=maybe").count() == 2

    def test_leaves_the_queryset_alone_without_the_parameter(self, book, draft):
        assert filtered("").count() == 2


class TestParseBoolParam:
    @pytest.mark.parametrize(
        "value, expected",
        [("true", True), ("YES", True), ("1", True), ("false", False), (" no ", False), ("0", False)],
    )
    def test_reads_common_spellings(self, value, expected):
        from books.filters import parse_bool_param

        assert parse_bool_param(value) is expected

    @pytest.mark.parametrize("value", [None, "", "maybe"])
    def test_returns_none_for_missing_or_unrecognised_values(self, value):
        from books.filters import parse_bool_param

        assert parse_bool_param(value) is None
