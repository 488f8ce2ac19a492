"""
Books API serializers
"""
import re

from django.contrib.auth import get_user_model
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from .models import Address, Book
from .utils import split_names


class BookSerializer(serializers.ModelSerializer):
    """Serializer for books; the owner is always the requesting user"""

    owner = serializers.ReadOnlyField(source="owner.username")
    # Raw input may carry hyphens; uniqueness is checked after normalising
    isbn = serializers.CharField(max_length=20)
    is_published = serializers.SerializerMethodField()

    class Meta:
        model = Book
        fields = [
            "id",
            "title",
            "author",
            "isbn",
            "published_on",
            "is_published",
            "is_available",
            "owner",
            "cover",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "owner", "created_at", "updated_at"]

    @extend_schema_field(OpenApiTypes.BOOL)
    def get_is_published(self, obj):
        return obj.is_published

    def validate_isbn(self, value):
        """Accept ISBN-10 or ISBN-13, storing digits only"""
        digits = re.sub(r"[\s-]", "", value)

        # ASCII digits only; ISBN-10 may end in an X check digit
        if not re.fullmatch(r"[0-9]{13}|[0-9]{9}[0-9Xx]", digits):
            raise serializers.ValidationError(
                "ISBN must have 10 or 13 digits (hyphens and spaces are ignored)."
            )

        isbn = digits.upper()

        duplicates = Book.objects.filter(isbn=isbn)
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise serializers.ValidationError("A book with this ISBN already exists.")

        return isbn

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title may not be blank.")
        return value


class AddressSerializer(serializers.ModelSerializer):
    """Serializer for the requesting user's addresses"""

    class Meta:
        model = Address
        fields = [
            "id",
            "street",
            "city",
            "postal_code",
            "country",
            "is_primary",
            "created_at",
        ]
        read_only_fields = ["id", "created_at"]

    def validate_country(self, value):
        if not re.fullmatch(r"[A-Za-z]{2}", value):
            raise serializers.ValidationError("Use a two-letter ISO 3166-1 country code.")
        return value.upper()


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for the current user

    Accepts a write-only full_name which is split into first and last name.
    """

    full_name = serializers.CharField(write_only=True, required=False, allow_blank=True)
    display_name = serializers.SerializerMethodField()
    book_count = serializers.SerializerMethodField()

    class Meta:
        model = get_user_model()
        fields = [
            "id",
            "username",
            "email",
            "first_name",
            "last_name",
            "full_name",
            "display_name",
            "book_count",
        ]
        read_only_fields = ["id", "username"]

    @extend_schema_field(OpenApiTypes.STR)
    def get_display_name(self, obj):
        return obj.get_full_name() or obj.username

    @extend_schema_field(OpenApiTypes.INT)
    def get_book_count(self, obj):
        return obj.books.count()

    def update(self, instance, validated_data):
        if "full_name" in validated_data:
            first_name, last_name = split_names(validated_data.pop("full_name"))
            validated_data["first_name"] = first_name
            validated_data["last_name"] = last_name

        return super().update(instance, validated_data)
