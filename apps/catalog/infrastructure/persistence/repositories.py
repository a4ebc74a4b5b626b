"""
Repository pattern implementation.
Abstracts database access to decouple domain logic from persistence.
"""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.core.paginator import Paginator

from apps.catalog.domain.interfaces import BaseProductRepository
from apps.catalog.domain.models import Product, ProductPage
from apps.catalog.infrastructure.persistence.models import Product as ProductModel


def to_entity(model: ProductModel) -> Product:
    return Product(
        id=model.id,
        name=model.name,
        price=Decimal(model.price),
        created_at=model.created_at,
    )


class DjangoProductRepository(BaseProductRepository):
    """Repository for the Product aggregate."""

    def create(self, name: str, price: Decimal) -> Product:
        model = ProductModel.objects.create(name=name, price=price)
        # Re-read so the price carries the column's precision.
        model.refresh_from_db()
        return to_entity(model)

    def get(self, product_id: UUID) -> Optional[Product]:
        model = ProductModel.objects.filter(pk=product_id).first()
        return to_entity(model) if model else None

    def update(self, product_id: UUID, name: str, price: Decimal) -> Optional[Product]:
        """Update a product in place. Returns None when it doesn't exist."""
        model = ProductModel.objects.filter(pk=product_id).first()
        if model is None:
            return None

        model.name = name
        model.price = price
        model.save(update_fields=["name", "price", "updated_at"])
        model.refresh_from_db()
        return to_entity(model)

    def delete(self, product_id: UUID) -> bool:
        deleted, _ = ProductModel.objects.filter(pk=product_id).delete()
        return deleted > 0

    def list_all(self) -> List[Product]:
        return [to_entity(m) for m in ProductModel.objects.all()]

    def list_page(self, page: int, per_page: int) -> ProductPage:
        """
        Get one page of products in creation order.
        Invalid page numbers fall back to the first page, out of range
        ones to the last.
        """
        paginator = Paginator(ProductModel.objects.all(), per_page)
        page_obj = paginator.get_page(page)
        return ProductPage(
            items=[to_entity(m) for m in page_obj.object_list],
            number=page_obj.number,
            per_page=per_page,
            total=paginator.count,
        )
