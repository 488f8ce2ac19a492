"""
Book and address models

Read logic lives on the QuerySet classes so views and filters chain
named methods instead of repeating raw filter() calls.
"""
from django.conf import settings
from django.db import models, transaction
from django.db.models import Q
from django.utils import timezone

from core.storage import select_media_storage


class BookQuerySet(models.QuerySet):
    """Chainable read methods for books"""

    def published(self):
        """Books with a publication date that is not in the future"""
        return self.filter(published_on__isnull=False, published_on__lte=timezone.localdate())

    def unpublished(self):
        return self.filter(
            Q(published_on__isnull=True) | Q(published_on__gt=timezone.localdate())
        )

    def available(self):
        return self.filter(is_available=True)

    def owned_by(self, user):
        """Books owned by user; anonymous users own nothing"""
        if user is None or not user.is_authenticated:
            return self.none()
        return self.filter(owner=user)

    def search(self, term):
        """Case-insensitive match on title or author; a blank term matches all"""
        term = (term or "").strip()
        if not term:
            return self
        return self.filter(Q(title__icontains=term) | Q(author__icontains=term))


class Book(models.Model):
    """A book owned by a user"""

    title = models.CharField(max_length=255)
    author = models.CharField(max_length=255)
    isbn = models.CharField(max_length=13, unique=True)
    published_on = models.DateField(null=True, blank=True)
    is_available = models.BooleanField(default=True)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL, related_name="books", on_delete=models.CASCADE
    )
    cover = models.FileField(upload_to="covers/", storage=select_media_storage, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BookQuerySet.as_manager()

    class Meta:
        ordering = ["title", "id"]

    def __str__(self):
        return f"{self.title} by {self.author}"

    @property
    def is_published(self):
        return self.published_on is not None and self.published_on <= timezone.localdate()


class AddressQuerySet(models.QuerySet):
    """Chainable read methods for addresses"""

    def for_user(self, user):
        if user is None or not user.is_authenticated:
            return self.none()
        return self.filter(user=user)

    def primary(self):
        return self.filter(is_primary=True)


class Address(models.Model):
    """A postal address belonging to a user"""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, related_name="addresses", on_delete=models.CASCADE
    )
    street = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    postal_code = models.CharField(max_length=20)
    country = models.CharField(max_length=2, help_text="ISO 3166-1 alpha-2 code")
    is_primary = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AddressQuerySet.as_manager()

    class Meta:
        ordering = ["-is_primary", "created_at", "id"]
        verbose_name_plural = "addresses"

    def __str__(self):
        return f"{self.street}, {self.postal_code} {self.city}, {self.country}"

    def save(self, *args, **kwargs):
        """Keep at most one primary address per user"""
        self.country = self.country.upper()
        with transaction.atomic():
            if self.is_primary:
                Address.objects.for_user(self.user).primary().exclude(pk=self.pk).update(
                    is_primary=False
                )
            super().save(*args, **kwargs)
