from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from apps.catalog.domain.models import Product, ProductPage


class BaseProductRepository(ABC):
    """Storage capability the catalog core depends on."""

    @abstractmethod
    def create(self, name: str, price: Decimal) -> Product:
        pass

    @abstractmethod
    def get(self, product_id: UUID) -> Optional[Product]:
        pass

    @abstractmethod
    def update(self, product_id: UUID, name: str, price: Decimal) -> Optional[Product]:
        pass

    @abstractmethod
    def delete(self, product_id: UUID) -> bool:
        pass

    @abstractmethod
    def list_all(self) -> List[Product]:
        pass

    @abstractmethod
    def list_page(self, page: int, per_page: int) -> ProductPage:
        pass
