# ORM models live in the infrastructure layer; Django discovers them here.
from apps.catalog.infrastructure.persistence.models import Product  # noqa: F401
