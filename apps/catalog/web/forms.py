from django import forms

from apps.catalog.infrastructure.registry import get_validation_policy


class ProductForm(forms.Form):
    """
    HTML form for products. Field rules come from ProductValidationPolicy;
    the validated ProductInput ends up in ``cleaned_data["product"]``.
    """

    name = forms.CharField(required=False)
    price = forms.CharField(required=False)

    def __init__(self, *args, policy=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.policy = policy or get_validation_policy()

    def clean(self):
        cleaned_data = super().clean()
        result = self.policy.validate(cleaned_data.get("name"), cleaned_data.get("price"))

        for error in result.errors:
            self.add_error(error.field, error.message)

        if result.is_valid:
            cleaned_data["product"] = result.value
        return cleaned_data
