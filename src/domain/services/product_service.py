"""Product domain service."""

from src.domain.entities.product import Product


class ProductService:
    """Stateless product operations."""

    @staticmethod
    def increase_price(products: list[Product], percentage: float) -> list[Product]:
        """Raise the price of every product by a percentage, in place.

        Args:
            products: Products to reprice.
            percentage: Increase in percent (100 doubles the price).

        Returns:
            list[Product]: The same product instances, repriced.

        Raises:
            ValidationError: If a resulting price would be negative.
        """
        for product in products:
            product.change_price(product.price * percentage / 100 + product.price)
        return products
