import pytest
from decimal import Decimal

from apps.catalog.domain.models import ErrorReason
from apps.catalog.domain.services import ProductValidationPolicy


@pytest.fixture
def policy():
    return ProductValidationPolicy(max_price=Decimal("1000000"))


class TestProductValidationPolicy:
    """Tests for ProductValidationPolicy."""

    def test_valid_input_is_normalized(self, policy):
        result = policy.validate("  Product 123 ", "1234")

        assert result.is_valid
        assert result.value.name == "Product 123"
        assert result.value.price == Decimal("1234")
        assert isinstance(result.value.price, Decimal)

    @pytest.mark.parametrize("price", [0, 1, 1234, "999999.99", 1_000_000, Decimal("1000000.00"), 12.5])
    def test_prices_up_to_maximum_are_accepted(self, policy, price):
        assert policy.validate("Product", price).is_valid

    @pytest.mark.parametrize("price", [1_000_001, 1_234_567, "1000000.01"])
    def test_prices_above_maximum_are_rejected(self, policy, price):
        result = policy.validate("Product", price)

        assert not result.is_valid
        assert result.errors[0].field == "price"
        assert result.errors[0].reason is ErrorReason.TOO_LARGE

    def test_empty_fields_are_all_reported(self, policy):
        """
        Test that both invalid fields are named in one result.
        """
        result = policy.validate("", "")

        assert not result.is_valid
        assert result.invalid_fields == ["name", "price"]
        assert all(e.reason is ErrorReason.REQUIRED for e in result.errors)
        assert result.value is None

    def test_missing_fields_are_required(self, policy):
        result = policy.validate(None, None)

        assert result.invalid_fields == ["name", "price"]
        assert all(e.reason is ErrorReason.REQUIRED for e in result.errors)

    def test_blank_name_is_required(self, policy):
        result = policy.validate("   ", 10)

        assert result.invalid_fields == ["name"]
        assert result.errors[0].reason is ErrorReason.REQUIRED

    @pytest.mark.parametrize("price", ["abc", "12,5", "1_000", "1 000", True, [], "NaN", "Infinity"])
    def test_non_numeric_price_is_invalid_type(self, policy, price):
        result = policy.validate("Product", price)

        assert result.invalid_fields == ["price"]
        assert result.errors[0].reason is ErrorReason.INVALID_TYPE

    @pytest.mark.parametrize("price", [" 12.50 ", "+3", ".5", "1e3"])
    def test_plain_numeric_strings_are_accepted(self, policy, price):
        assert policy.validate("Product", price).is_valid

    def test_negative_price_is_too_small(self, policy):
        result = policy.validate("Product", "-1")

        assert result.errors[0].reason is ErrorReason.TOO_SMALL

    def test_long_name_is_too_long(self, policy):
        result = policy.validate("x" * 256, 1)

        assert result.invalid_fields == ["name"]
        assert result.errors[0].reason is ErrorReason.TOO_LONG

    def test_non_string_name_is_invalid_type(self, policy):
        result = policy.validate(123, 1)

        assert result.errors[0].reason is ErrorReason.INVALID_TYPE

    def test_errors_by_field_messages(self, policy):
        result = policy.validate("", "abc")

        assert result.errors_by_field() == {
            "name": ["The name field is required."],
            "price": ["The price field must be a number."],
        }

    def test_validate_is_idempotent(self, policy):
        first = policy.validate("", "2000000")
        second = policy.validate("", "2000000")

        assert first == second

    def test_custom_maximum(self):
        policy = ProductValidationPolicy(max_price=100)

        assert policy.validate("Cheap", 100).is_valid
        assert not policy.validate("Pricey", 101).is_valid
