"""
Serializers for the catalog API.
Product input is validated by ProductValidationPolicy; these serializers
describe output shapes, plus the query of the convert endpoint.
"""

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)


class ProductEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer(read_only=True)


class ProductListEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer(many=True, read_only=True)


class ProductInputSerializer(serializers.Serializer):
    """Request body documented in the OpenAPI schema."""

    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(max_digits=12, decimal_places=2)


class ValidationErrorSerializer(serializers.Serializer):
    message = serializers.CharField()
    errors = serializers.DictField(child=serializers.ListField(child=serializers.CharField()))


class ConversionResultSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=None, decimal_places=None)
    source_currency = serializers.CharField()
    exchanged_currency = serializers.CharField()
    converted_amount = serializers.DecimalField(max_digits=None, decimal_places=None)
    supported = serializers.BooleanField()


class ConversionQuerySerializer(serializers.Serializer):
    """
    Query parameters of the convert endpoint. ``amount`` is bounded so the
    converted value always fits a JSON number.
    """

    amount = serializers.DecimalField(max_digits=30, decimal_places=None)
    source_currency = serializers.CharField()
    exchanged_currency = serializers.CharField()
