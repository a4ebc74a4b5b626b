from decimal import Decimal
from uuid import uuid4

from apps.catalog.api.v1.serializers import (
    ConversionResultSerializer,
    ProductEnvelopeSerializer,
    ProductSerializer,
)
from apps.catalog.application.dto import ConversionResultDTO
from apps.catalog.domain.models import Product


def test_serialize_product():
    """
    Test that ProductSerializer exposes only id, name and price.
    """
    product = Product(id=uuid4(), name="Product 1", price=Decimal("123"))

    data = ProductSerializer(product).data

    assert set(data) == {"id", "name", "price"}
    assert data["id"] == str(product.id)
    assert data["name"] == "Product 1"
    assert data["price"] == Decimal("123.00")


def test_serialize_product_envelope():
    product = Product(id=uuid4(), name="Product 1", price=Decimal("1"))

    data = ProductEnvelopeSerializer({"data": product}).data

    assert data["data"]["name"] == "Product 1"


def test_serialize_conversion_result():
    result = ConversionResultDTO(
        amount=Decimal("100"),
        source_currency="usd",
        exchanged_currency="eur",
        converted_amount=Decimal("98.00"),
        supported=True,
    )

    data = ConversionResultSerializer(result).data

    assert data["converted_amount"] == Decimal("98.00")
    assert data["source_currency"] == "usd"
    assert data["supported"] is True
