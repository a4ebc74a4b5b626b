from decimal import Decimal


class CatalogError(Exception):
    """Base class for catalog domain errors."""


class PriceTooLarge(CatalogError):

    def __init__(self, price: Decimal, max_price: Decimal):
        self.price = price
        self.max_price = max_price
        super().__init__(f"Price {price} exceeds the maximum of {max_price}")



class InvalidPrice(CatalogError):

    def __init__(self, price):
        self.price = price
        super().__init__(f"Price {price!r} is not a finite number")
