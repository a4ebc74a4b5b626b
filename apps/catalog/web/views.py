"""
Server-rendered product pages.
Listing needs a logged-in user; every page that changes products needs an
admin. Validation failures re-render the form with status 422.
"""

import logging
from uuid import UUID

from django.conf import settings
from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render
from django.views import View

from apps.catalog.domain.access import Operation
from apps.catalog.domain.exceptions import PriceTooLarge
from apps.catalog.infrastructure.registry import (
    get_access_policy,
    get_creation_service,
    get_product_repository,
)
from apps.catalog.web.forms import ProductForm
from apps.catalog.web.mixins import AccessPolicyMixin, MethodOverrideMixin

logger = logging.getLogger(__name__)

FORM_TEMPLATE = "catalog/product_form.html"
UNPROCESSABLE = 422


class ProductViewMixin(AccessPolicyMixin):

    def get_repository(self):
        return get_product_repository()

    def get_product(self, pk: UUID):
        product = self.get_repository().get(pk)
        if product is None:
            raise Http404("Product not found")
        return product

    def render_form(self, form, product=None, status=200):
        return render(
            self.request,
            FORM_TEMPLATE,
            {"form": form, "product": product},
            status=status,
        )


class ProductIndexView(ProductViewMixin, View):
    """GET lists products a page at a time, POST stores a new one."""

    access_operations = {
        "get": Operation.WEB_LIST,
        "post": Operation.WEB_CREATE,
    }

    def get(self, request):
        page = self.get_repository().list_page(
            request.GET.get("page", 1),
            settings.CATALOG_PAGE_SIZE,
        )
        return render(request, "catalog/product_list.html", {
            "products": page.items,
            "page": page,
            "can_manage": get_access_policy().authorize(self.get_actor(), Operation.WEB_CREATE),
        })

    def post(self, request):
        form = ProductForm(request.POST)
        if not form.is_valid():
            return self.render_form(form, status=UNPROCESSABLE)

        product_input = form.cleaned_data["product"]
        try:
            product = get_creation_service(self.get_repository()).create(
                product_input.name,
                product_input.price,
            )
        except PriceTooLarge as e:
            form.add_error("price", str(e))
            return self.render_form(form, status=UNPROCESSABLE)

        messages.success(request, f"Product \"{product.name}\" created.")
        return redirect("products:index")


class ProductCreateView(ProductViewMixin, View):

    access_operations = {"get": Operation.WEB_CREATE_FORM}

    def get(self, request):
        return self.render_form(ProductForm())


class ProductEditView(ProductViewMixin, View):

    access_operations = {"get": Operation.WEB_EDIT_FORM}

    def get(self, request, pk):
        product = self.get_product(pk)
        form = ProductForm(initial={"name": product.name, "price": product.price})
        return self.render_form(form, product=product)


class ProductDetailView(MethodOverrideMixin, ProductViewMixin, View):
    """PUT updates a product, DELETE removes it."""

    access_operations = {
        "put": Operation.WEB_UPDATE,
        "delete": Operation.WEB_DELETE,
    }

    def put(self, request, pk):
        product = self.get_product(pk)

        form = ProductForm(self.form_data)
        if not form.is_valid():
            return self.render_form(form, product=product, status=UNPROCESSABLE)

        product_input = form.cleaned_data["product"]
        updated = self.get_repository().update(product.id, product_input.name, product_input.price)
        if updated is None:
            raise Http404("Product not found")

        logger.info("Updated product %s (user=%s)", updated.id, request.user)
        messages.success(request, f"Product \"{updated.name}\" updated.")
        return redirect("products:index")

    def delete(self, request, pk):
        product = self.get_product(pk)
        self.get_repository().delete(product.id)

        logger.info("Deleted product %s (user=%s)", product.id, request.user)
        messages.success(request, f"Product \"{product.name}\" deleted.")
        return redirect("products:index")
