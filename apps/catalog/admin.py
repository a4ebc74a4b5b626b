"""
Django Admin configuration for the catalog app.
The admin form runs ProductValidationPolicy so products saved here obey
the same rules as the ones created through the site and the API.
"""

from django import forms
from django.contrib import admin

from apps.catalog.infrastructure.persistence.models import Product
from apps.catalog.infrastructure.registry import get_validation_policy


class ProductAdminForm(forms.ModelForm):

    class Meta:
        model = Product
        fields = ("name", "price")

    def clean(self):
        cleaned_data = super().clean()
        result = get_validation_policy().validate(
            self.data.get("name"),
            self.data.get("price"),
        )
        for error in result.errors:
            if error.field not in self.errors:
                self.add_error(error.field, error.message)
        if result.is_valid:
            cleaned_data["name"] = result.value.name
            cleaned_data["price"] = result.value.price
        return cleaned_data


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    form = ProductAdminForm
    list_display = ('name', 'price', 'created_at')
    search_fields = ('name',)
    readonly_fields = ('id', 'created_at', 'updated_at')
    ordering = ('created_at',)

    fieldsets = (
        ('Product Information', {
            'fields': ('name', 'price')
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
