"""
Core views: API root and health checks
"""
import logging
import time

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from core.environment import get_connection_info

logger = logging.getLogger(__name__)

# Latency above which the database is reported as slow
SLOW_QUERY_THRESHOLD_MS = 100

# Connection details safe to show on an unauthenticated endpoint
PUBLIC_CONNECTION_FIELDS = ("environment", "engine", "database", "ssl_mode")


def describe_connection():
    """Public part of the live connection's settings, never the credentials"""
    info = get_connection_info(settings.ENVIRONMENT, connection.settings_dict)
    return {field: info[field] for field in PUBLIC_CONNECTION_FIELDS}


def ping_database():
    """Run a trivial query and return its latency in milliseconds"""
    started = time.perf_counter()
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return round((time.perf_counter() - started) * 1000, 2)


@extend_schema(
    tags=["Health"],
    summary="Database health check",
    description=(
        "Run a trivial query against the configured database. Reports the "
        "latency, whether it is above the slow threshold, and which "
        "environment, engine and SSL mode are in use."
    ),
    responses={
        200: OpenApiTypes.OBJECT,
        503: OpenApiTypes.OBJECT,
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
@never_cache
def database_health_check(request):
    """
    Response format:
        {"status": "healthy", "latency_ms": 1.2, "slow": false, "connection": {...}}
        {"status": "unhealthy", "error": "...", "connection": {...}}
    """
    details = describe_connection()

    try:
        latency_ms = ping_database()
    except DatabaseError as e:
        logger.error(f"Database health check failed on {details['engine']}: {e}", exc_info=True)
        return Response(
            {"status": "unhealthy", "error": str(e), "connection": details},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    slow = latency_ms > SLOW_QUERY_THRESHOLD_MS
    if slow:
        logger.warning(
            f"Database health check took {latency_ms}ms "
            f"(threshold {SLOW_QUERY_THRESHOLD_MS}ms) in {details['environment']}"
        )

    return Response(
        {
            "status": "healthy",
            "latency_ms": latency_ms,
            "slow": slow,
            "connection": details,
        }
    )


def api_root(request):
    """API root endpoint showing available endpoints"""
    return JsonResponse(
        {
            "message": "Django REST in Style API",
            "version": "1.0",
            "environment": settings.ENVIRONMENT,
            "endpoints": {
                "health": "/api/health/db",
                "books": "/api/books/",
                "addresses": "/api/addresses/",
                "me": "/api/users/me/",
                "token": "/api/auth/token/",
                "conventions": "/api/conventions/rules/",
                "schema": "/api/schema/",
                "docs": "/api/docs/",
            },
        }
    )
