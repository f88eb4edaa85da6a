"""
Role based access control.

Roles are read from the verified access token (``request.user`` is a
token user exposing the ``role`` claim).
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS

from .models import User

ADMIN_ROLES = {User.ROLE_ADMIN}


def is_admin(user) -> bool:
    return bool(user and user.is_authenticated and getattr(user, "role", None) in ADMIN_ROLES)


class IsAdminRole(BasePermission):
    """Allow access only to users with an administrative role."""
    message = "Admin access required"

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return is_admin(getattr(request, "user", None))


class ReadOnly(BasePermission):
    """Allow read‑only access (GET, HEAD, OPTIONS)."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return request.method in SAFE_METHODS


class IsOwnerOrAdmin(BasePermission):
    """Object owner (``obj.patient_id``) or an administrator."""
    message = "You may only modify your own appointments"

    def has_object_permission(self, request, view, obj) -> bool:
        user = getattr(request, "user", None)
        if not (user and user.is_authenticated):
            return False
        if is_admin(user):
            return True
        return str(getattr(obj, "patient_id", None)) == str(user.id)
