"""
Contact Management Permissions
"""
from rest_framework import permissions


class IsContactAdmin(permissions.BasePermission):
    """
    Only signed-in, active admin accounts may read or triage submissions.
    """

    def has_permission(self, request, view):
        return bool(
            request.user and
            request.user.is_authenticated and
            request.user.is_active
        )
