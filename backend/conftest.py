"""
Pytest configuration and fixtures.
"""
import datetime

import pytest
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploaded files out of the project tree and hash passwords fast."""
    settings.MEDIA_ROOT = tmp_path / "media"
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    return settings.MEDIA_ROOT


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="ada", email="ada@example.com", password="analytical-engine"
    )


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(
        username="charles", email="charles@example.com", password="difference-engine"
    )


@pytest.fixture
def auth_client(user):
    """API client authenticated as user."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def other_client(other_user):
    """API client authenticated as other_user."""
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


@pytest.fixture
def book(user):
    from books.models import Book

    return Book.objects.create(
        title="Notes on the Analytical Engine",
        author="Ada Lovelace",
        isbn="9780000000001",
        published_on=datetime.date(1843, 9, 1),
        owner=user,
    )


@pytest.fixture
def address(user):
    from books.models import Address

    return Address.objects.create(
        user=user,
        street="12 St James's Square",
        city="London",
        postal_code="SW1Y 4JH",
        country="GB",
        is_primary=True,
    )
