"""
Data Transfer Objects for the application layer.
DTOs decouple internal domain models from external API contracts.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from apps.catalog.domain.models import ValidationResult

INVALID_DATA_MESSAGE = "The given data was invalid."


@dataclass
class ConversionResultDTO:
    """Result DTO for currency conversion."""
    amount: Decimal
    source_currency: str
    exchanged_currency: str
    converted_amount: Decimal
    supported: bool


@dataclass
class ValidationErrorDTO:
    """Per-field validation failures, as returned with a 422."""
    errors: Dict[str, List[str]] = field(default_factory=dict)
    message: str = INVALID_DATA_MESSAGE

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationErrorDTO":
        return cls(errors=result.errors_by_field())

    @classmethod
    def for_field(cls, field_name: str, message: str) -> "ValidationErrorDTO":
        return cls(errors={field_name: [message]})
