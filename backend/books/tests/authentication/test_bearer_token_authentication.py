"""Tests for books.authentication.BearerTokenAuthentication"""
import pytest
from django.urls import reverse
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient


@pytest.mark.django_db
class TestAuthenticate:
    def test_authenticates_a_request_with_a_bearer_token(self, user):
        token = Token.objects.create(user=user)
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")

        response = client.get(reverse("books:user-detail"))

        assert response.status_code == 200
        assert response.data["username"] == user.username

    def test_rejects_the_token_keyword(self, user):
        token = Token.objects.create(user=user)
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")

        response = client.get(reverse("books:user-detail"))

        assert response.status_code in (401, 403)

    def test_rejects_an_unknown_token(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION="Bearer not-a-real-token")

        response = client.get(reverse("books:user-detail"))

        assert response.status_code == 401

    def test_challenges_anonymous_requests_with_the_bearer_scheme(self):
        response = APIClient().get(reverse("books:user-detail"))

        assert response.status_code == 401
        assert response["WWW-Authenticate"] == "Bearer"
