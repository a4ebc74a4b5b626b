"""
Pure domain entities (POPOs).
No dependency on Django or the ORM.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple
from uuid import UUID


@dataclass(frozen=True)
class Product:

    id: UUID
    name: str
    price: Decimal
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ProductPage:
    """One page of products in listing order."""

    items: List[Product]
    number: int
    per_page: int
    total: int

    @property
    def num_pages(self) -> int:
        if self.total == 0:
            return 1
        return (self.total + self.per_page - 1) // self.per_page

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.num_pages


class ErrorReason(str, Enum):
    REQUIRED = "required"
    INVALID_TYPE = "invalid_type"
    TOO_LARGE = "too_large"
    TOO_SMALL = "too_small"
    TOO_LONG = "too_long"


@dataclass(frozen=True)
class FieldError:

    field: str
    reason: ErrorReason
    message: str


@dataclass(frozen=True)
class ProductInput:
    """Normalized product fields that passed validation."""

    name: str
    price: Decimal


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating raw product input.

    Exactly one of ``value`` and ``errors`` is populated: a valid result
    carries the normalized input, an invalid one every failing field.
    """

    value: Optional[ProductInput] = None
    errors: Tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def invalid_fields(self) -> List[str]:
        fields: List[str] = []
        for error in self.errors:
            if error.field not in fields:
                fields.append(error.field)
        return fields

    def errors_by_field(self) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


@dataclass(frozen=True)
class RateTable:
    """
    Read-only conversion rates keyed by (source, target) currency code.
    Built once at startup and handed to the converter.
    """

    rates: Mapping[Tuple[str, str], Decimal] = field(default_factory=dict)

    @classmethod
    def from_nested(cls, config: Mapping[str, Mapping[str, object]]) -> "RateTable":
        """
        Build a table from ``{"usd": {"eur": "0.98"}}`` style configuration.

        Example:
            >>> RateTable.from_nested({"usd": {"eur": "0.98"}}).get("usd", "eur")
            Decimal('0.98')
        """
        rates = {}
        for source, targets in config.items():
            for target, rate in targets.items():
                value = Decimal(str(rate))
                if value <= 0:
                    raise ValueError(f"rate for {source}/{target} must be positive, got {value}")
                rates[(source, target)] = value
        return cls(rates=dict(rates))

    def get(self, source: str, target: str) -> Optional[Decimal]:
        return self.rates.get((source, target))

    def pairs(self) -> List[Tuple[str, str]]:
        return sorted(self.rates)
