from decimal import Decimal, InvalidOperation

from django.core.management.base import BaseCommand, CommandError

from apps.catalog.infrastructure.registry import get_currency_converter


class Command(BaseCommand):
    help = 'Convert an amount between currencies using the fixed rate table'

    def add_arguments(self, parser):
        parser.add_argument('amount', type=str, help='Amount to convert')
        parser.add_argument('source_currency', type=str, help='Source currency code, e.g. usd')
        parser.add_argument('exchanged_currency', type=str, help='Target currency code, e.g. eur')

    def handle(self, **options):
        source = options['source_currency']
        target = options['exchanged_currency']

        try:
            amount = Decimal(options['amount'])
        except InvalidOperation:
            raise CommandError('Invalid amount. Must be a number')

        converter = get_currency_converter()
        if not converter.supports(source, target):
            self.stdout.write(
                self.style.WARNING(f'No rate for {source}/{target}, result is 0')
            )

        converted = converter.convert(amount, source, target)
        self.stdout.write(
            self.style.SUCCESS(f'{amount} {source} = {converted} {target}')
        )
