"""
Product-related exceptions.
"""

from .base import CoffeeHouseException


class ProductException(CoffeeHouseException):
    """Base exception for product-related errors."""
    pass


class ProductNotFoundException(ProductException):
    """Raised when product is not found in database."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product with ID {product_id} not found",
            details={'product_id': product_id}
        )
        self.product_id = product_id
