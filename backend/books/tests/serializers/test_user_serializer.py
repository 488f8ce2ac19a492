"""Tests for books.serializers.UserSerializer"""
import pytest

from books.serializers import UserSerializer


@pytest.mark.django_db
class TestUpdate:
    def test_splits_full_name_into_first_and_last_name(self, user):
        serializer = UserSerializer(user, data={"full_name": "Augusta Ada King"}, partial=True)
        assert serializer.is_valid(), serializer.errors

        serializer.save()

        user.refresh_from_db()
        assert user.first_name == "Augusta"
        assert user.last_name == "Ada King"

    def test_clears_both_names_for_a_blank_full_name(self, user):
        user.first_name, user.last_name = "Ada", "Lovelace"
        user.save()
        serializer = UserSerializer(user, data={"full_name": ""}, partial=True)
        assert serializer.is_valid(), serializer.errors

        serializer.save()

        user.refresh_from_db()
        assert (user.first_name, user.last_name) == ("", "")

    def test_leaves_names_alone_without_full_name(self, user):
        user.first_name = "Ada"
        user.save()
        serializer = UserSerializer(user, data={"email": "countess@example.com"}, partial=True)
        assert serializer.is_valid(), serializer.errors

        serializer.save()

        user.refresh_from_db()
        assert user.first_name == "Ada"
        assert user.email == "countess@example.com"


@pytest.mark.django_db
class TestToRepresentation:
    def test_never_exposes_full_name(self, user):
        assert "full_name" not in UserSerializer(user).data

    def test_falls_back_to_the_username_for_display_name(self, user):
        assert UserSerializer(user).data["display_name"] == user.username
