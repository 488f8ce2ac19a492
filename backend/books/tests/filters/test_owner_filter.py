"""Tests for books.filters.OwnerFilter"""
import pytest
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from books.filters import OwnerFilter
from books.models import Book


@pytest.mark.django_db
class TestFilterQueryset:
    def test_keeps_only_the_requesters_books_for_me(self, book, other_user):
        Book.objects.create(title="Theirs", author="B", isbn="3000000001", owner=other_user)
        request = Request(APIRequestFactory().get("/api/books/?owner=me"))
        request.user = book.owner

        books = OwnerFilter().filter_queryset(request, Book.objects.all(), view=None)

        assert list(books) == [book]

    def test_ignores_values_other_than_me(self, book, other_user):
        Book.objects.create(title="Theirs", author="B", isbn="3000000002", owner=other_user)
        request = Request(APIRequestFactory().get(f"/api/books/?owner={other_user.username}"))

        books = OwnerFilter().filter_queryset(request, Book.objects.all(), view=None)

        assert books.count() == 2
