from django.urls import path

from apps.catalog.web.views import (
    ProductCreateView,
    ProductDetailView,
    ProductEditView,
    ProductIndexView,
)

app_name = "products"

urlpatterns = [
    path("", ProductIndexView.as_view(), name="index"),
    path("create/", ProductCreateView.as_view(), name="create"),
    path("<uuid:pk>/", ProductDetailView.as_view(), name="detail"),
    path("<uuid:pk>/edit/", ProductEditView.as_view(), name="edit"),
]
