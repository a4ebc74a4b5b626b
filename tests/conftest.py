import itertools
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from apps.catalog.domain.interfaces import BaseProductRepository
from apps.catalog.domain.models import Product, ProductPage
from apps.catalog.infrastructure.persistence.repositories import DjangoProductRepository


class InMemoryProductRepository(BaseProductRepository):
    """Repository double that records writes."""

    def __init__(self):
        self.products = {}
        self.writes = 0
        self._clock = itertools.count()

    def create(self, name, price):
        self.writes += 1
        product = Product(
            id=uuid4(),
            name=name,
            price=Decimal(price),
            created_at=datetime.fromtimestamp(next(self._clock), tz=timezone.utc),
        )
        self.products[product.id] = product
        return product

    def get(self, product_id):
        return self.products.get(product_id)

    def update(self, product_id, name, price):
        if product_id not in self.products:
            return None
        self.writes += 1
        current = self.products[product_id]
        self.products[product_id] = Product(id=current.id, name=name, price=price, created_at=current.created_at)
        return self.products[product_id]

    def delete(self, product_id):
        if self.products.pop(product_id, None) is None:
            return False
        self.writes += 1
        return True

    def list_all(self):
        return sorted(self.products.values(), key=lambda p: p.created_at)

    def list_page(self, page, per_page):
        items = self.list_all()
        start = (page - 1) * per_page
        return ProductPage(items=items[start:start + per_page], number=page, per_page=per_page, total=len(items))


@pytest.fixture
def memory_repository():
    return InMemoryProductRepository()


@pytest.fixture
def repository(db):
    return DjangoProductRepository()


@pytest.fixture
def make_product(repository):
    """Create products through the ORM repository."""
    counter = itertools.count(1)

    def _make(name=None, price="123"):
        return repository.create(name or f"Product {next(counter)}", Decimal(price))

    return _make


@pytest.fixture
def api_client():
    """DRF API client."""
    return APIClient()


@pytest.fixture
def user(db, django_user_model):
    return django_user_model.objects.create_user(username="user", password="password123")


@pytest.fixture
def staff_user(db, django_user_model):
    return django_user_model.objects.create_user(username="admin", password="password123", is_staff=True)
