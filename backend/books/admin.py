"""
Admin configuration for book models
"""
from django.contrib import admin

from .models import Address, Book


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    list_display = [
        "title",
        "author",
        "isbn",
        "published_on",
        "is_available",
        "owner",
        "created_at",
    ]
    list_filter = ["is_available", "published_on", "created_at"]
    search_fields = ["title", "author", "isbn"]
    readonly_fields = ["created_at", "updated_at"]


@admin.register(Address)
class AddressAdmin(admin.ModelAdmin):
    list_display = ["user", "street", "city", "postal_code", "country", "is_primary"]
    list_filter = ["country", "is_primary"]
    search_fields = ["street", "city", "postal_code", "user__username"]
