"""
Object permissions for the books API
"""
from rest_framework.permissions import SAFE_METHODS, BasePermission


def _owner_of(obj):
    # Books have an owner, addresses have a user
    return getattr(obj, "owner", None) or getattr(obj, "user", None)


class IsOwner(BasePermission):
    """Only the owner may access the object at all"""

    message = "You do not own this object."

    def has_object_permission(self, request, view, obj):
        return _owner_of(obj) == request.user


class IsOwnerOrReadOnly(BasePermission):
    """Anyone may read; only the owner may modify"""

    message = "Only the owner may modify this object."

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        return _owner_of(obj) == request.user
