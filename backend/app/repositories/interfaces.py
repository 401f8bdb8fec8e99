"""
Repository Interfaces

Abstract base classes for the data access the services depend on.
Services receive implementations through their constructors, so the
PostgreSQL repositories can be swapped for in-memory ones in tests.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from app.domain.customer import Customer
from app.domain.product import Product
from app.domain.order import Order, OrderProduct


class ICustomersRepository(ABC):
    """Customer lookup and registration."""

    @abstractmethod
    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find customer by ID

        Returns:
            Customer or None if not found
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Customer]:
        pass

    @abstractmethod
    def create(self, name: str, email: str) -> Customer:
        pass


class IProductsRepository(ABC):
    """Product catalog lookup and stock updates."""

    @abstractmethod
    def find_all_by_id(self, product_ids: Sequence[str]) -> List[Product]:
        """
        Find every product whose id is in product_ids

        Returns:
            The products that exist. May hold fewer entries than requested;
            a partial result is not an error.
        """
        pass

    @abstractmethod
    def update_quantities(self, quantities: Sequence[Tuple[str, int]]) -> None:
        """
        Set the stock of each product

        Args:
            quantities: (product_id, new_quantity) pairs, written as one batch
        """
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Product]:
        pass

    @abstractmethod
    def create(self, name: str, price: Decimal, quantity: int) -> Product:
        pass


class IOrdersRepository(ABC):
    """Order persistence."""

    @abstractmethod
    def create(self, customer: Customer, order_products: List[OrderProduct]) -> Order:
        """
        Persist an order and its line items as one atomic unit

        Args:
            customer: Customer placing the order
            order_products: Line items (product_id, quantity, price)

        Returns:
            The stored Order with generated id and timestamps
        """
        pass

    @abstractmethod
    def find_by_id(self, order_id: str) -> Optional[Order]:
        pass
