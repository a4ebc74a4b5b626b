from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from django.http import QueryDict

from apps.catalog.domain.access import AccessDecision
from apps.catalog.infrastructure.registry import actor_for, get_access_policy


class MethodOverrideMixin:
    """
    Lets HTML forms reach put()/delete() handlers by posting a ``_method``
    field. Form data of real PUT requests is parsed into ``self.form_data``.
    """

    overridable_methods = ("put", "delete")

    def dispatch(self, request, *args, **kwargs):
        if request.method == "POST":
            override = request.POST.get("_method", "").lower()
            if override in self.overridable_methods:
                request.method = override.upper()
            self.form_data = request.POST
        elif request.method in ("PUT", "PATCH"):
            self.form_data = QueryDict(request.body, encoding=request.encoding)
        else:
            self.form_data = QueryDict()
        return super().dispatch(request, *args, **kwargs)


class AccessPolicyMixin:
    """
    Checks the AccessPolicy before any handler runs.
    ``access_operations`` maps lowercase HTTP methods to Operations.
    """

    access_operations = {}

    def get_actor(self):
        return actor_for(self.request.user)

    def get_operation(self, method):
        # Django answers HEAD with the GET handler, so it needs the same check.
        if method == "head" and "head" not in self.access_operations:
            method = "get"
        return self.access_operations.get(method)

    def dispatch(self, request, *args, **kwargs):
        operation = self.get_operation(request.method.lower())
        if operation is not None:
            decision = get_access_policy().check(self.get_actor(), operation)
            if decision is AccessDecision.UNAUTHENTICATED:
                return redirect_to_login(request.get_full_path())
            if decision is AccessDecision.FORBIDDEN:
                raise PermissionDenied
        return super().dispatch(request, *args, **kwargs)
