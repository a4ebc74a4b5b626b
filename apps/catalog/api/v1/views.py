"""
ViewSets for the catalog API v1.
Products are served from the repository; every action runs the
AccessPolicy first through AccessPolicyPermission.
"""

import logging
from dataclasses import asdict
from uuid import UUID

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from apps.catalog.api.v1.permissions import AccessPolicyPermission
from apps.catalog.api.v1.serializers import (
    ConversionQuerySerializer,
    ConversionResultSerializer,
    ProductEnvelopeSerializer,
    ProductInputSerializer,
    ProductListEnvelopeSerializer,
    ProductSerializer,
    ValidationErrorSerializer,
)
from apps.catalog.application.dto import ConversionResultDTO, ValidationErrorDTO
from apps.catalog.domain.access import Operation
from apps.catalog.domain.exceptions import PriceTooLarge
from apps.catalog.infrastructure.registry import (
    get_creation_service,
    get_currency_converter,
    get_product_repository,
    get_validation_policy,
)

logger = logging.getLogger(__name__)


def unprocessable(dto: ValidationErrorDTO) -> Response:
    return Response(asdict(dto), status=status.HTTP_422_UNPROCESSABLE_ENTITY)


def product_fields(request):
    data = request.data if hasattr(request.data, "get") else {}
    return data.get("name"), data.get("price")


@extend_schema(tags=['Products'])
class ProductViewSet(viewsets.ViewSet):

    permission_classes = [AccessPolicyPermission]
    lookup_value_regex = "[0-9a-fA-F-]{32,36}"
    access_operations = {
        "list": Operation.API_LIST,
        "retrieve": Operation.API_SHOW,
        "create": Operation.API_CREATE,
        "update": Operation.API_UPDATE,
        "destroy": Operation.API_DELETE,
    }

    def get_repository(self):
        return get_product_repository()

    def get_product_or_404(self, pk):
        try:
            product_id = UUID(str(pk))
        except ValueError:
            raise NotFound("Product not found.")

        product = self.get_repository().get(product_id)
        if product is None:
            raise NotFound("Product not found.")
        return product

    @extend_schema(responses=ProductListEnvelopeSerializer)
    def list(self, request):
        products = self.get_repository().list_all()
        return Response({"data": ProductSerializer(products, many=True).data})

    @extend_schema(
        request=ProductInputSerializer,
        responses={201: ProductEnvelopeSerializer, 422: ValidationErrorSerializer},
    )
    def create(self, request):
        result = get_validation_policy().validate(*product_fields(request))
        if not result.is_valid:
            return unprocessable(ValidationErrorDTO.from_result(result))

        try:
            product = get_creation_service(self.get_repository()).create(
                result.value.name,
                result.value.price,
            )
        except PriceTooLarge as e:
            return unprocessable(ValidationErrorDTO.for_field("price", str(e)))

        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: ProductEnvelopeSerializer, 404: OpenApiResponse(description="Not found")})
    def retrieve(self, request, pk=None):
        product = self.get_product_or_404(pk)
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        request=ProductInputSerializer,
        responses={200: ProductEnvelopeSerializer, 422: ValidationErrorSerializer},
    )
    def update(self, request, pk=None):
        product = self.get_product_or_404(pk)

        result = get_validation_policy().validate(*product_fields(request))
        if not result.is_valid:
            return unprocessable(ValidationErrorDTO.from_result(result))

        updated = self.get_repository().update(product.id, result.value.name, result.value.price)
        if updated is None:
            raise NotFound("Product not found.")

        logger.info("Updated product %s via API", updated.id)
        return Response({"data": ProductSerializer(updated).data})

    @extend_schema(responses={204: None})
    def destroy(self, request, pk=None):
        product = self.get_product_or_404(pk)
        self.get_repository().delete(product.id)
        logger.info("Deleted product %s via API (user=%s)", product.id, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Currency'])
class CurrencyViewSet(viewsets.ViewSet):

    @extend_schema(
        parameters=[
            OpenApiParameter("amount", OpenApiTypes.DECIMAL, required=True, description="Amount to convert"),
            OpenApiParameter("source_currency", OpenApiTypes.STR, required=True, description="Source currency code (e.g. usd)"),
            OpenApiParameter("exchanged_currency", OpenApiTypes.STR, required=True, description="Target currency code (e.g. eur)"),
        ],
        responses=ConversionResultSerializer,
        description="Convert an amount with the fixed rate table. Unsupported pairs convert to 0."
    )
    @action(detail=False, methods=['get'], url_path='convert')
    def convert(self, request):
        query = ConversionQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(
                {"error": "Invalid conversion request", "details": query.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        amount = query.validated_data["amount"]
        source_currency = query.validated_data["source_currency"]
        exchanged_currency = query.validated_data["exchanged_currency"]

        converter = get_currency_converter()
        result = ConversionResultDTO(
            amount=amount,
            source_currency=source_currency,
            exchanged_currency=exchanged_currency,
            converted_amount=converter.convert(amount, source_currency, exchanged_currency),
            supported=converter.supports(source_currency, exchanged_currency),
        )
        return Response(ConversionResultSerializer(result).data)
