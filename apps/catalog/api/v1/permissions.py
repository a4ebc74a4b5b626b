from rest_framework import exceptions
from rest_framework.permissions import BasePermission

from apps.catalog.domain.access import AccessDecision
from apps.catalog.infrastructure.registry import actor_for, get_access_policy


class AccessPolicyPermission(BasePermission):
    """
    Runs the catalog AccessPolicy for the viewset action.
    Views declare ``access_operations`` mapping action names to Operations.
    """

    def has_permission(self, request, view):
        operation = getattr(view, "access_operations", {}).get(view.action)
        if operation is None:
            return True

        decision = get_access_policy().check(actor_for(request.user), operation)
        if decision is AccessDecision.UNAUTHENTICATED:
            raise exceptions.NotAuthenticated()
        if decision is AccessDecision.FORBIDDEN:
            raise exceptions.PermissionDenied()
        return True
