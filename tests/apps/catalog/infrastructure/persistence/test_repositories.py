import pytest
from decimal import Decimal
from uuid import uuid4

from apps.catalog.infrastructure.persistence.models import Product as ProductModel


@pytest.mark.django_db
class TestDjangoProductRepository:
    """Tests for DjangoProductRepository."""

    def test_create(self, repository):
        """Test create stores a product and returns it with an identifier."""
        product = repository.create("Product 123", Decimal("1234"))

        assert product.id is not None
        assert product.name == "Product 123"
        assert product.price == Decimal("1234")
        assert ProductModel.objects.filter(pk=product.id, name="Product 123").exists()

    def test_create_keeps_column_precision(self, repository):
        product = repository.create("Rounded", Decimal("19.999"))

        assert product.price == Decimal("20.00")

    def test_get(self, repository, make_product):
        created = make_product(name="table")

        assert repository.get(created.id) == created

    def test_get_not_found(self, repository):
        assert repository.get(uuid4()) is None

    def test_update(self, repository, make_product):
        created = make_product()

        updated = repository.update(created.id, "Renamed", Decimal("99.50"))

        assert updated.id == created.id
        assert updated.name == "Renamed"
        assert updated.price == Decimal("99.50")
        assert repository.get(created.id).name == "Renamed"

    def test_update_not_found(self, repository):
        assert repository.update(uuid4(), "Nope", Decimal("1")) is None

    def test_delete(self, repository, make_product):
        created = make_product()

        assert repository.delete(created.id) is True
        assert repository.get(created.id) is None
        assert ProductModel.objects.count() == 0

    def test_delete_not_found(self, repository):
        assert repository.delete(uuid4()) is False

    def test_list_all_in_creation_order(self, repository, make_product):
        first = make_product(name="first")
        second = make_product(name="second")

        assert [p.id for p in repository.list_all()] == [first.id, second.id]

    def test_same_timestamp_is_ordered_by_id(self, repository, make_product):
        """Test products created at the same instant still list in a stable order."""
        products = [make_product() for _ in range(12)]
        ProductModel.objects.update(created_at=products[0].created_at)

        expected = sorted(p.id for p in products)
        assert [p.id for p in repository.list_all()] == expected

        first, second = repository.list_page(1, 10), repository.list_page(2, 10)
        assert [p.id for p in first.items + second.items] == expected

    def test_list_page_excludes_eleventh_product(self, repository, make_product):
        """Test the first page of 10 leaves out the 11th product."""
        products = [make_product() for _ in range(11)]

        page = repository.list_page(1, 10)

        assert len(page.items) == 10
        assert page.total == 11
        assert page.num_pages == 2
        assert products[-1].id not in [p.id for p in page.items]

    def test_list_second_page(self, repository, make_product):
        products = [make_product() for _ in range(11)]

        page = repository.list_page(2, 10)

        assert [p.id for p in page.items] == [products[-1].id]
        assert page.has_previous

    @pytest.mark.parametrize("page_number", ["abc", None])
    def test_list_page_invalid_number_falls_back_to_first(self, repository, make_product, page_number):
        make_product()

        assert repository.list_page(page_number, 10).number == 1

    def test_list_page_out_of_range_falls_back_to_last(self, repository, make_product):
        for _ in range(11):
            make_product()

        assert repository.list_page(99, 10).number == 2
