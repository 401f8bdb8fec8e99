"""
Product Service
Adds products to the catalog
"""
import logging
from decimal import Decimal

from app.core.errors import ProductAlreadyExists
from app.domain.product import Product
from app.repositories.interfaces import IProductsRepository

logger = logging.getLogger(__name__)


class CreateProductService:
    """Service for adding a catalog product (name must be unique)"""

    def __init__(self, products_repository: IProductsRepository):
        self.products_repository = products_repository

    def execute(self, name: str, price: Decimal, quantity: int) -> Product:
        """
        Add a product to the catalog

        Raises:
            ProductAlreadyExists: a product with this name exists
        """
        if self.products_repository.find_by_name(name):
            logger.warning(f"Product creation rejected: {name} already exists")
            raise ProductAlreadyExists(name)

        product = self.products_repository.create(name=name, price=price, quantity=quantity)
        logger.info(f"Product {product.id} created with stock {product.quantity}")

        return product
