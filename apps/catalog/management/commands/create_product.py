from django.core.management.base import BaseCommand, CommandError

from apps.catalog.domain.exceptions import PriceTooLarge
from apps.catalog.infrastructure.registry import get_creation_service, get_validation_policy


class Command(BaseCommand):
    help = 'Create a product after running the catalog validation rules'

    def add_arguments(self, parser):
        parser.add_argument('name', type=str, help='Product name')
        parser.add_argument('price', type=str, help='Product price')

    def handle(self, **options):
        result = get_validation_policy().validate(options['name'], options['price'])
        if not result.is_valid:
            details = '; '.join(
                f"{field}: {' '.join(messages)}"
                for field, messages in result.errors_by_field().items()
            )
            raise CommandError(f'Invalid product. {details}')

        try:
            product = get_creation_service().create(result.value.name, result.value.price)
        except PriceTooLarge as e:
            raise CommandError(str(e))

        self.stdout.write(
            self.style.SUCCESS(f'Created product {product.id}: {product.name} ({product.price})')
        )
