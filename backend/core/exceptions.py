"""
Custom exceptions and the REST framework exception handler
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ConventionError(Exception):
    """Base exception for convention catalog errors"""

    pass


class UnknownRuleError(ConventionError):
    """Exception raised when a rule id is not in the catalog"""

    def __init__(self, rule_id):
        self.rule_id = rule_id
        super().__init__(f"Unknown rule '{rule_id}'")


class UnknownSubjectKindError(ConventionError):
    """Exception raised when a test subject kind has no naming rule"""

    def __init__(self, kind, valid_kinds):
        self.kind = kind
        super().__init__(
            f"Unknown subject kind '{kind}'. Must be one of: {', '.join(valid_kinds)}"
        )


class InvalidLayoutError(ConventionError, ValueError):
    """Exception raised when a layout template cannot be built"""

    pass


def api_exception_handler(exc, context):
    """
    REST framework exception handler

    Delegates to the default handler, then maps convention errors that
    escape a view to {"error": message} responses.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, ConventionError):
        view = context.get("view")
        logger.warning(
            f"Convention error in {view.__class__.__name__ if view else 'unknown view'}: {exc}"
        )

        status_code = (
            status.HTTP_404_NOT_FOUND
            if isinstance(exc, UnknownRuleError)
            else status.HTTP_400_BAD_REQUEST
        )
        return Response({"error": str(exc)}, status=status_code)

    return None
