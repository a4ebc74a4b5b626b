"""
Django ORM models for persistence.
Infrastructure layer — technical storage detail.
"""

import uuid
from django.db import models


class BaseModel(models.Model):

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class Product(BaseModel):

    name = models.CharField(max_length=255)
    price = models.DecimalField(
        decimal_places=2,
        max_digits=12,
    )

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.name} ({self.price})"
