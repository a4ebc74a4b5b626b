"""
Access rules for product operations.

Each operation names the surface it is reached through, because the
browsing pages and the JSON API do not share the same requirements
(deleting through the API only needs a logged-in user).
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Actor:

    is_authenticated: bool = False
    is_admin: bool = False


ANONYMOUS = Actor()


class Requirement(Enum):
    NONE = "none"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


class AccessDecision(Enum):
    ALLOWED = "allowed"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


class Operation(Enum):
    WEB_LIST = "web.list"
    WEB_CREATE_FORM = "web.create_form"
    WEB_CREATE = "web.create"
    WEB_EDIT_FORM = "web.edit_form"
    WEB_UPDATE = "web.update"
    WEB_DELETE = "web.delete"

    API_LIST = "api.list"
    API_SHOW = "api.show"
    API_CREATE = "api.create"
    API_UPDATE = "api.update"
    API_DELETE = "api.delete"


REQUIREMENTS = {
    Operation.WEB_LIST: Requirement.AUTHENTICATED,
    Operation.WEB_CREATE_FORM: Requirement.ADMIN,
    Operation.WEB_CREATE: Requirement.ADMIN,
    Operation.WEB_EDIT_FORM: Requirement.ADMIN,
    Operation.WEB_UPDATE: Requirement.ADMIN,
    Operation.WEB_DELETE: Requirement.ADMIN,
    Operation.API_LIST: Requirement.NONE,
    Operation.API_SHOW: Requirement.NONE,
    Operation.API_CREATE: Requirement.NONE,
    Operation.API_UPDATE: Requirement.NONE,
    Operation.API_DELETE: Requirement.AUTHENTICATED,
}


class AccessPolicy:

    def __init__(self, requirements=None):
        self.requirements = dict(REQUIREMENTS if requirements is None else requirements)

    def check(self, actor: Actor, operation: Operation) -> AccessDecision:
        requirement = self.requirements[operation]

        if requirement is Requirement.NONE:
            return AccessDecision.ALLOWED
        if not actor.is_authenticated:
            return AccessDecision.UNAUTHENTICATED
        if requirement is Requirement.ADMIN and not actor.is_admin:
            return AccessDecision.FORBIDDEN
        return AccessDecision.ALLOWED

    def authorize(self, actor: Actor, operation: Operation) -> bool:
        return self.check(actor, operation) is AccessDecision.ALLOWED
