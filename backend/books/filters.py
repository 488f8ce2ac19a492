"""
Filter backends for book listings

Each backend reads one query parameter and delegates to a BookQuerySet
method. Unknown or malformed values leave the queryset unchanged.
"""
import logging

from rest_framework.filters import BaseFilterBackend

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes"}
FALSE_VALUES = {"0", "false", "no"}


def parse_bool_param(value):
    """Return True, False or None for an unrecognised value"""
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return None


def query_parameter(name, description, schema):
    return {
        "name": name,
        "required": False,
        "in": "query",
        "description": description,
        "schema": schema,
    }


class PublishedFilter(BaseFilterBackend):
    """?published=true|false"""

    param = "published"

    def filter_queryset(self, request, queryset, view):
        raw = request.query_params.get(self.param)
        published = parse_bool_param(raw)

        if published is None:
            if raw is not None:
                logger.debug(f"Ignoring invalid {self.param} value: {raw!r}")
            return queryset

        return queryset.published() if published else queryset.unpublished()

    def get_schema_operation_parameters(self, view):
        return [
            query_parameter(
                self.param,
                "Only published (true) or unpublished (false) books",
                {"type": "boolean"},
            )
        ]


class OwnerFilter(BaseFilterBackend):
    """?owner=me"""

    param = "owner"

    def filter_queryset(self, request, queryset, view):
        if request.query_params.get(self.param) != "me":
            return queryset
        return queryset.owned_by(request.user)

    def get_schema_operation_parameters(self, view):
        return [
            query_parameter(
                self.param,
                "Use 'me' to list only your own books",
                {"type": "string", "enum": ["me"]},
            )
        ]


class SearchFilter(BaseFilterBackend):
    """?q=<term> on title or author"""

    param = "q"

    def filter_queryset(self, request, queryset, view):
        return queryset.search(request.query_params.get(self.param, ""))

    def get_schema_operation_parameters(self, view):
        return [query_parameter(self.param, "Search title or author", {"type": "string"})]
