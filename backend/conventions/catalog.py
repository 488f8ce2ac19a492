"""
Rule catalog

The conventions as data: where each layer lives, how its classes are
named, how settings are read and how tests are named and written. Each
rule carries a short illustrative snippet written against the books app.

Usage:
    from conventions.catalog import CATALOG

    CATALOG.get("NAMING-PERMISSION").example
    'IsOwnerOrReadOnly'
"""
import logging
import re
from dataclasses import asdict, dataclass
from enum import Enum
from textwrap import dedent
from typing import Dict, Iterable, Iterator, List

from core.exceptions import UnknownRuleError

logger = logging.getLogger(__name__)

RULE_ID_PATTERN = re.compile(r"^[A-Z]+(-[A-Z]+)+$")


class Category(str, Enum):
    LAYOUT = "layout"
    NAMING = "naming"
    SETTINGS = "settings"
    TESTING = "testing"

    @classmethod
    def parse(cls, value: str) -> "Category":
        """
        Look up a category by name, ignoring case

        Raises:
            ValueError: If no category has that name
        """
        valid = ", ".join(c.value for c in cls)
        if not isinstance(value, str):
            raise ValueError(f"Invalid category {value!r}. Must be one of: {valid}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid category '{value}'. Must be one of: {valid}")


@dataclass(frozen=True)
class Rule:
    """A single convention"""

    id: str
    category: Category
    title: str
    subject: str
    description: str
    placement: str = ""
    pattern: str = ""
    example: str = ""
    snippet: str = ""

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["category"] = self.category.value
        return data


class RuleCatalog:
    """
    Ordered, immutable collection of rules

    Lookup by id is case-insensitive. Ids must be unique.
    """

    def __init__(self, rules: Iterable[Rule]):
        self._rules = tuple(rules)
        self._by_id = {}

        for rule in self._rules:
            if not RULE_ID_PATTERN.match(rule.id):
                raise ValueError(f"Rule id '{rule.id}' must be upper-case words joined by '-'")
            if rule.id in self._by_id:
                raise ValueError(f"Duplicate rule id '{rule.id}'")
            self._by_id[rule.id] = rule

    def __len__(self):
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule_id):
        return isinstance(rule_id, str) and rule_id.strip().upper() in self._by_id

    def all(self) -> List[Rule]:
        return list(self._rules)

    def get(self, rule_id: str) -> Rule:
        """
        Get a rule by id

        Raises:
            UnknownRuleError: If the catalog has no such rule
        """
        if rule_id not in self:
            logger.debug(f"Rule lookup failed: {rule_id!r}")
            raise UnknownRuleError(rule_id)
        return self._by_id[rule_id.strip().upper()]

    def by_category(self, category) -> List[Rule]:
        if not isinstance(category, Category):
            category = Category.parse(category)
        return [rule for rule in self._rules if rule.category is category]

    def categories(self) -> List[Category]:
        seen = []
        for rule in self._rules:
            if rule.category not in seen:
                seen.append(rule.category)
        return seen


def _snippet(code: str) -> str:
    return dedent(code).strip() + "\n"


# Module sets shared with conventions.layout
APP_MODULES = (
    "views.py",
    "models.py",
    "serializers.py",
    "authentication.py",
    "permissions.py",
    "filters.py",
    "urls.py",
)
CORE_MODULES = (
    "settings.py",
    "asgi.py",
    "wsgi.py",
    "storage.py",
)

HTTP_VERBS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")


RULES = [
    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    Rule(
        id="LAYOUT-APP-MODULES",
        category=Category.LAYOUT,
        title="One module per layer in every app",
        subject="app package",
        description=(
            "Each app keeps its layers in fixed modules: "
            + ", ".join(APP_MODULES)
            + ", and a tests/ package. A layer an app does not need is left out, "
            "never merged into another module."
        ),
        placement="<app>/",
        pattern=r"(views|models|serializers|authentication|permissions|filters|urls)\.py",
        example="permissions.py",
        snippet=_snippet('''
            # books/urls.py
            from django.urls import path

            from . import views

            app_name = "books"

            urlpatterns = [
                path("books/", views.BookListView.as_view(), name="book-list"),
            ]
        '''),
    ),
    Rule(
        id="LAYOUT-CORE-MODULES",
        category=Category.LAYOUT,
        title="Project-wide modules live in core",
        subject="core package",
        description=(
            "The project package is called core and holds "
            + ", ".join(CORE_MODULES)
            + " and a tests/ package. Nothing app-specific goes there."
        ),
        placement="core/",
        pattern=r"(settings|asgi|wsgi|storage)\.py",
        example="storage.py",
        snippet=_snippet('''
            # core/wsgi.py
            import os

            from django.core.wsgi import get_wsgi_application

            os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings")

            application = get_wsgi_application()
        '''),
    ),
    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------
    Rule(
        id="NAMING-AUTHENTICATION",
        category=Category.NAMING,
        title="Authentication classes are named after their scheme",
        subject="authentication class",
        description="Name the class <Scheme>Authentication and subclass the closest DRF class.",
        placement="authentication.py",
        pattern=r"[A-Z][A-Za-z0-9]*Authentication",
        example="BearerTokenAuthentication",
        snippet=_snippet('''
            from rest_framework.authentication import TokenAuthentication


            class BearerTokenAuthentication(TokenAuthentication):
                keyword = "Bearer"
        '''),
    ),
    Rule(
        id="NAMING-PERMISSION",
        category=Category.NAMING,
        title="Permissions read as a condition",
        subject="permission class",
        description=(
            "Name the class Is<Condition> so that permission_classes reads as a "
            "sentence, e.g. [IsAuthenticated, IsOwnerOrReadOnly]."
        ),
        placement="permissions.py",
        pattern=r"Is[A-Z][A-Za-z0-9]*",
        example="IsOwnerOrReadOnly",
        snippet=_snippet('''
            from rest_framework.permissions import SAFE_METHODS, BasePermission


            class IsOwnerOrReadOnly(BasePermission):
                def has_object_permission(self, request, view, obj):
                    return request.method in SAFE_METHODS or obj.owner == request.user
        '''),
    ),
    Rule(
        id="NAMING-VIEW",
        category=Category.NAMING,
        title="Views are named after model and action",
        subject="view class",
        description=(
            "Name the class <Model><Action>View where the action is List for "
            "collections and Detail for single objects."
        ),
        placement="views.py",
        pattern=r"[A-Z][A-Za-z0-9]*(List|Detail)View",
        example="BookDetailView",
        snippet=_snippet('''
            from rest_framework import generics

            from books.models import Book
            from books.serializers import BookSerializer


            class BookDetailView(generics.RetrieveUpdateDestroyAPIView):
                queryset = Book.objects.all()
                serializer_class = BookSerializer
        '''),
    ),
    Rule(
        id="NAMING-SERIALIZER",
        category=Category.NAMING,
        title="Serializers are named after their model",
        subject="serializer class",
        description="Name the class <Model>Serializer; add a purpose prefix only for a second serializer of the same model.",
        placement="serializers.py",
        pattern=r"[A-Z][A-Za-z0-9]*Serializer",
        example="BookSerializer",
        snippet=_snippet('''
            from rest_framework import serializers

            from books.models import Book


            class BookSerializer(serializers.ModelSerializer):
                class Meta:
                    model = Book
                    fields = ["id", "title", "author", "isbn"]
        '''),
    ),
    Rule(
        id="NAMING-MODEL",
        category=Category.NAMING,
        title="Models are singular nouns",
        subject="model class",
        description="Name the model as a singular CapWords noun; the table holds many, the class describes one.",
        placement="models.py",
        pattern=r"[A-Z][a-z0-9]+([A-Z][a-z0-9]+)*",
        example="Address",
        snippet=_snippet('''
            from django.conf import settings
            from django.db import models


            class Address(models.Model):
                user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
                city = models.CharField(max_length=100)
        '''),
    ),
    Rule(
        id="NAMING-QUERYSET",
        category=Category.NAMING,
        title="Read logic lives on a QuerySet",
        subject="queryset class",
        description=(
            "Name the class <Model>QuerySet, attach it with as_manager(), and give "
            "it chainable methods named as adjectives or predicates: published(), "
            "owned_by(user)."
        ),
        placement="models.py",
        pattern=r"[A-Z][A-Za-z0-9]*QuerySet",
        example="BookQuerySet",
        snippet=_snippet('''
            from django.db import models
            from django.utils import timezone


            class BookQuerySet(models.QuerySet):
                def published(self):
                    return self.filter(published_on__lte=timezone.localdate())

                def owned_by(self, user):
                    return self.filter(owner=user)
        '''),
    ),
    Rule(
        id="NAMING-FILTER",
        category=Category.NAMING,
        title="Filter backends are named after their criterion",
        subject="filter backend class",
        description=(
            "Name the class <Criterion>Filter; each backend reads one query "
            "parameter and calls one QuerySet method."
        ),
        placement="filters.py",
        pattern=r"[A-Z][A-Za-z0-9]*Filter",
        example="PublishedFilter",
        snippet=_snippet('''
            from rest_framework.filters import BaseFilterBackend


            class PublishedFilter(BaseFilterBackend):
                def filter_queryset(self, request, queryset, view):
                    if request.query_params.get("published") == "true":
                        return queryset.published()
                    return queryset
        '''),
    ),
    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    Rule(
        id="SETTINGS-ENVIRONMENT",
        category=Category.SETTINGS,
        title="Settings come from environment variables",
        subject="settings value",
        description=(
            "Anything that differs between deployments is read from an environment "
            "variable with a safe development default. Secrets have no production "
            "default."
        ),
        placement="core/settings.py",
        pattern=r"[A-Z][A-Z0-9_]*",
        example="ALLOWED_HOSTS",
        snippet=_snippet('''
            import os

            DEBUG = os.getenv("DEBUG", "false").lower() == "true"
            ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "localhost").split(",")
        '''),
    ),
    Rule(
        id="SETTINGS-SINGLE-MODULE",
        category=Category.SETTINGS,
        title="One settings module",
        subject="settings module",
        description=(
            "There is a single core/settings.py. Differences between environments "
            "come from variables, not from per-environment settings modules."
        ),
        placement="core/settings.py",
        example="core.settings",
        snippet=_snippet('''
            import os

            os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings")
        '''),
    ),
    Rule(
        id="SETTINGS-STORAGE",
        category=Category.SETTINGS,
        title="File storage is configured in core",
        subject="storage class",
        description=(
            "Storage classes live in core/storage.py and are selected by a "
            "setting; models reference the selector, never a concrete backend."
        ),
        placement="core/storage.py",
        pattern=r"[A-Z][A-Za-z0-9]*Storage",
        example="OverwriteStorage",
        snippet=_snippet('''
            from django.core.files.storage import FileSystemStorage


            class OverwriteStorage(FileSystemStorage):
                def get_available_name(self, name, max_length=None):
                    if self.exists(name):
                        self.delete(name)
                    return super().get_available_name(name, max_length=max_length)
        '''),
    ),
    # ------------------------------------------------------------------
    # Testing
    # ------------------------------------------------------------------
    Rule(
        id="TEST-PATH-MIRROR",
        category=Category.TESTING,
        title="Test paths mirror source paths",
        subject="test module",
        description=(
            "Tests for <app>/<module>.py live in <app>/tests/<module>/, one file "
            "per function, class or view: test_<subject>.py."
        ),
        placement="<app>/tests/",
        pattern=r"test_[a-z0-9_]+\.py",
        example="test_split_names.py",
        snippet=_snippet('''
            # books/utils.py            -> books/tests/utils/test_split_names.py
            # books/views.py (BookDetailView) -> books/tests/views/test_book_detail.py
            SOURCE = "books/utils.py"
            TEST = "books/tests/utils/test_split_names.py"
        '''),
    ),
    Rule(
        id="TEST-CLASS-FUNCTION",
        category=Category.TESTING,
        title="Functions are tested in TestFunction",
        subject="test class for a function",
        description=(
            "The module already names the function, so the class covering a "
            "module-level function is always TestFunction."
        ),
        pattern=r"TestFunction",
        example="TestFunction",
        snippet=_snippet('''
            from books.utils import split_names


            class TestFunction:
                def test_returns_empty_names_for_blank_input(self):
                    assert split_names("  ") == ("", "")
        '''),
    ),
    Rule(
        id="TEST-CLASS-METHOD",
        category=Category.TESTING,
        title="Methods are tested in Test<MethodName>",
        subject="test class for a method",
        description=(
            "Each method of the class under test gets its own test class named "
            "Test followed by the method name in CapWords."
        ),
        pattern=r"Test[A-Z][A-Za-z0-9]*",
        example="TestOwnedBy",
        snippet=_snippet('''
            import pytest

            from books.models import Book


            @pytest.mark.django_db
            class TestOwnedBy:
                def test_excludes_books_of_other_users(self, user, other_user):
                    assert not Book.objects.owned_by(other_user).filter(owner=user).exists()
        '''),
    ),
    Rule(
        id="TEST-CLASS-ENDPOINT",
        category=Category.TESTING,
        title="Endpoints are tested in Test<HttpVerb>",
        subject="test class for an endpoint",
        description=(
            "Each HTTP method a view handles gets its own test class: TestGet, "
            "TestPost, TestPatch, TestDelete."
        ),
        pattern=r"Test(" + "|".join(verb.capitalize() for verb in HTTP_VERBS) + r")",
        example="TestPatch",
        snippet=_snippet('''
            import pytest
            from django.urls import reverse


            @pytest.mark.django_db
            class TestPatch:
                def test_returns_403_for_a_user_who_is_not_the_owner(self, auth_client, book):
                    url = reverse("books:book-detail", kwargs={"pk": book.pk})

                    response = auth_client.patch(url, {"title": "New"})

                    assert response.status_code == 403
        '''),
    ),
    Rule(
        id="TEST-NAME-PROPOSITION",
        category=Category.TESTING,
        title="Test names are propositions",
        subject="test function",
        description=(
            "Name each test as a sentence stating the behaviour and its condition, "
            "so a failing test reads as a false statement."
        ),
        pattern=r"test_[a-z0-9]+(_[a-z0-9]+)+",
        example="test_returns_404_when_the_book_does_not_exist",
        snippet=_snippet('''
            def test_returns_404_when_the_book_does_not_exist(api_client):
                response = api_client.get("/api/books/999/")

                assert response.status_code == 404
        '''),
    ),
    Rule(
        id="TEST-ARRANGE-ACT-ASSERT",
        category=Category.TESTING,
        title="Arrange, act, assert",
        subject="test body",
        description=(
            "Separate setup, the single action under test and the assertions with "
            "blank lines. Shared setup moves into fixtures."
        ),
        snippet=_snippet('''
            from books.models import Book


            def test_lists_only_published_books(user):
                Book.objects.create(title="Draft", author="A", isbn="1", owner=user)

                books = Book.objects.published()

                assert list(books) == []
        '''),
    ),
    Rule(
        id="TEST-MOCK-LOOKUP-SITE",
        category=Category.TESTING,
        title="Patch where the name is looked up",
        subject="mock",
        description=(
            "Patch the attribute on the module that uses it, not on the module "
            "that defines it, and assert on the mock only for outgoing side effects."
        ),
        snippet=_snippet('''
            from unittest import mock


            def test_reports_latency_in_milliseconds(api_client):
                with mock.patch("core.views.time.time", side_effect=[0, 0.01, 0.01]):
                    response = api_client.get("/api/health/db")

                assert response.json()["latency_ms"] == 10.0
        '''),
    ),
    Rule(
        id="TEST-ONE-BEHAVIOUR",
        category=Category.TESTING,
        title="One behaviour per test",
        subject="test function",
        description=(
            "A test checks one behaviour. Several asserts are fine when they "
            "describe the same outcome; a second action means a second test."
        ),
        snippet=_snippet('''
            from books.utils import split_names


            def test_puts_middle_names_into_the_last_name():
                first, last = split_names("Ada King Lovelace")

                assert first == "Ada"
                assert last == "King Lovelace"
        '''),
    ),
]

CATALOG = RuleCatalog(RULES)
