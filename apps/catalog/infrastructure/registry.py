"""
Wiring between Django settings and the framework-free catalog core.
Views and commands get their collaborators from here.
"""

from functools import lru_cache

from django.conf import settings

from apps.catalog.domain.access import AccessPolicy, Actor, ANONYMOUS
from apps.catalog.domain.interfaces import BaseProductRepository
from apps.catalog.domain.models import RateTable
from apps.catalog.domain.services import (
    CurrencyConverter,
    ProductCreationService,
    ProductValidationPolicy,
)
from apps.catalog.infrastructure.persistence.repositories import DjangoProductRepository


@lru_cache(maxsize=None)
def get_rate_table() -> RateTable:
    """Rate table built from CURRENCY_RATES on first use, then reused."""
    return RateTable.from_nested(getattr(settings, "CURRENCY_RATES", {}))


def get_currency_converter() -> CurrencyConverter:
    return CurrencyConverter(get_rate_table())


def get_product_repository() -> BaseProductRepository:
    return DjangoProductRepository()


def get_validation_policy() -> ProductValidationPolicy:
    return ProductValidationPolicy(max_price=settings.CATALOG_MAX_PRICE)


def get_creation_service(repository: BaseProductRepository | None = None) -> ProductCreationService:
    return ProductCreationService(
        repository or get_product_repository(),
        max_price=settings.CATALOG_MAX_PRICE,
    )


def get_access_policy() -> AccessPolicy:
    return AccessPolicy()


def actor_for(user) -> Actor:
    """Map a Django user (or AnonymousUser) to an Actor. Staff users are admins."""
    if user is None or not user.is_authenticated:
        return ANONYMOUS
    return Actor(is_authenticated=True, is_admin=bool(user.is_staff))
