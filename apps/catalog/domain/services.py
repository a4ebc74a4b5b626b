"""
Domain services - Core business logic.
Currency conversion, product validation rules and product creation.
"""

import logging
import re
from decimal import MAX_EMAX, MIN_EMIN, Decimal, InvalidOperation, Overflow, localcontext
from typing import List, Optional, Tuple

from apps.catalog.domain.exceptions import InvalidPrice, PriceTooLarge
from apps.catalog.domain.interfaces import BaseProductRepository
from apps.catalog.domain.models import (
    ErrorReason,
    FieldError,
    Product,
    ProductInput,
    RateTable,
    ValidationResult,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_PRICE = Decimal("1000000")
NAME_MAX_LENGTH = 255

UNSUPPORTED = Decimal("0")

# Plain decimal notation, optionally with an exponent. No digit grouping.
NUMERIC_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class CurrencyConverter:
    """
    Converts amounts with a fixed rate table.

    An unsupported pair converts to zero instead of raising; use
    ``supports()`` to tell it apart from an amount that converts to zero.
    Converting a currency to itself returns the amount unchanged.
    """

    def __init__(self, rate_table: RateTable):
        self.rate_table = rate_table

    def rate(self, source: str, target: str) -> Optional[Decimal]:
        if source == target:
            return Decimal("1")
        return self.rate_table.get(source, target)

    def supports(self, source: str, target: str) -> bool:
        return self.rate(source, target) is not None

    def convert(self, amount, source: str, target: str) -> Decimal:
        """
        Convert ``amount`` from ``source`` to ``target``.

        Example:
            >>> converter = CurrencyConverter(RateTable.from_nested({"usd": {"eur": "0.98"}}))
            >>> converter.convert(100, "usd", "eur")
            Decimal('98.00')
            >>> converter.convert(100, "usd", "gbp")
            Decimal('0')
        """
        rate = self.rate(source, target)
        if rate is None:
            logger.debug("No rate for %s/%s, returning zero", source, target)
            return UNSUPPORTED
        with localcontext() as ctx:
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            # Past the widest exponent range the result saturates to Infinity.
            ctx.traps[Overflow] = False
            return to_decimal(amount) * rate


class ProductValidationPolicy:
    """
    Validation rules for raw product input.

    Every invalid field is reported in one result. The policy holds no
    state besides its configuration, so validating the same input twice
    gives the same answer.
    """

    def __init__(self, max_price: Decimal = DEFAULT_MAX_PRICE):
        self.max_price = to_decimal(max_price)

    def validate(self, name, price) -> ValidationResult:
        errors: List[FieldError] = []

        clean_name, name_error = self._check_name(name)
        if name_error:
            errors.append(name_error)

        clean_price, price_error = self._check_price(price)
        if price_error:
            errors.append(price_error)

        if errors:
            return ValidationResult(errors=tuple(errors))

        return ValidationResult(value=ProductInput(name=clean_name, price=clean_price))

    def _check_name(self, name) -> Tuple[Optional[str], Optional[FieldError]]:
        if name is None:
            return None, FieldError("name", ErrorReason.REQUIRED, "The name field is required.")
        if not isinstance(name, str):
            return None, FieldError("name", ErrorReason.INVALID_TYPE, "The name field must be a string.")

        name = name.strip()
        if not name:
            return None, FieldError("name", ErrorReason.REQUIRED, "The name field is required.")
        if len(name) > NAME_MAX_LENGTH:
            return None, FieldError(
                "name",
                ErrorReason.TOO_LONG,
                f"The name field must not be greater than {NAME_MAX_LENGTH} characters.",
            )
        return name, None

    def _check_price(self, price) -> Tuple[Optional[Decimal], Optional[FieldError]]:
        if price is None or (isinstance(price, str) and not price.strip()):
            return None, FieldError("price", ErrorReason.REQUIRED, "The price field is required.")

        # bool is an int subclass; True is not a price
        if isinstance(price, bool) or not isinstance(price, (str, int, float, Decimal)):
            return None, FieldError("price", ErrorReason.INVALID_TYPE, "The price field must be a number.")

        if isinstance(price, str):
            price = price.strip()
            if not NUMERIC_PATTERN.fullmatch(price):
                return None, FieldError("price", ErrorReason.INVALID_TYPE, "The price field must be a number.")

        try:
            value = to_decimal(price)
        except (InvalidOperation, ValueError):
            return None, FieldError("price", ErrorReason.INVALID_TYPE, "The price field must be a number.")

        if not value.is_finite():
            return None, FieldError("price", ErrorReason.INVALID_TYPE, "The price field must be a number.")
        if value > self.max_price:
            return None, FieldError(
                "price",
                ErrorReason.TOO_LARGE,
                f"The price field must not be greater than {self.max_price}.",
            )
        if value < 0:
            return None, FieldError("price", ErrorReason.TOO_SMALL, "The price field must be at least 0.")
        return value, None


class ProductCreationService:
    """
    Persists new products.

    The price ceiling is checked here as well as in
    ProductValidationPolicy, so callers that skip the policy still cannot
    store an oversized price. Non-numeric prices raise InvalidPrice.
    """

    def __init__(self, repository: BaseProductRepository, max_price: Decimal = DEFAULT_MAX_PRICE):
        self.repository = repository
        self.max_price = to_decimal(max_price)

    def create(self, name: str, price) -> Product:
        try:
            price = to_decimal(price)
        except (InvalidOperation, ValueError):
            raise InvalidPrice(price)
        if not price.is_finite():
            raise InvalidPrice(price)

        if price > self.max_price:
            logger.warning("Rejected product %r: price %s above %s", name, price, self.max_price)
            raise PriceTooLarge(price, self.max_price)

        product = self.repository.create(name, price)
        logger.info("Created product %s (%r, %s)", product.id, product.name, product.price)
        return product
