"""
Authentication classes for the books API
"""
from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """
    Token authentication using the standard Bearer keyword

    Clients send "Authorization: Bearer <token>" with a key issued by
    the /api/auth/token/ endpoint.
    """

    keyword = "Bearer"
