"""
Pytest fixtures and configuration for the backend tests

This file provides shared fixtures that can be used across all test modules:
in-memory repositories implementing the repository interfaces, a seeded
catalog, and the services built on top of them.

Author: TM3
Date: 2025-10-17
"""
import os
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple

import pytest
from dotenv import load_dotenv

# Load environment variables for tests
load_dotenv()

from app.domain.customer import Customer  # noqa: E402
from app.domain.order import Order, OrderProduct  # noqa: E402
from app.domain.product import Product  # noqa: E402
from app.repositories.interfaces import (  # noqa: E402
    ICustomersRepository,
    IOrdersRepository,
    IProductsRepository,
)
from app.services.create_order_service import CreateOrderService  # noqa: E402


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# In-memory repositories
# ============================================================================

class InMemoryCustomersRepository(ICustomersRepository):
    def __init__(self):
        self.customers: Dict[str, Customer] = {}

    def add(self, customer: Customer) -> Customer:
        self.customers[customer.id] = customer
        return customer

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        return self.customers.get(customer_id)

    def find_by_email(self, email: str) -> Optional[Customer]:
        return next((c for c in self.customers.values() if c.email == email), None)

    def create(self, name: str, email: str) -> Customer:
        now = _now()
        return self.add(Customer(id=str(uuid.uuid4()), name=name, email=email,
                                 created_at=now, updated_at=now))


class InMemoryProductsRepository(IProductsRepository):
    def __init__(self):
        self.products: Dict[str, Product] = {}
        self.update_calls: List[List[Tuple[str, int]]] = []

    def add(self, product: Product) -> Product:
        self.products[product.id] = product
        return product

    def find_all_by_id(self, product_ids: Sequence[str]) -> List[Product]:
        return [
            self.products[product_id].model_copy()
            for product_id in dict.fromkeys(product_ids)
            if product_id in self.products
        ]

    def update_quantities(self, quantities: Sequence[Tuple[str, int]]) -> None:
        self.update_calls.append(list(quantities))
        for product_id, quantity in quantities:
            self.products[product_id] = self.products[product_id].model_copy(
                update={'quantity': quantity, 'updated_at': _now()}
            )

    def find_by_name(self, name: str) -> Optional[Product]:
        return next((p for p in self.products.values() if p.name == name), None)

    def create(self, name: str, price: Decimal, quantity: int) -> Product:
        now = _now()
        return self.add(Product(id=str(uuid.uuid4()), name=name, price=price,
                                quantity=quantity, created_at=now, updated_at=now))


class InMemoryOrdersRepository(IOrdersRepository):
    def __init__(self):
        self.orders: Dict[str, Order] = {}

    def create(self, customer: Customer, order_products: List[OrderProduct]) -> Order:
        order_id = str(uuid.uuid4())
        now = _now()
        items = [
            item.model_copy(update={'id': str(uuid.uuid4()), 'order_id': order_id,
                                    'created_at': now, 'updated_at': now})
            for item in order_products
        ]
        order = Order(id=order_id, customer=customer, order_products=items,
                      created_at=now, updated_at=now)
        self.orders[order_id] = order
        return order

    def find_by_id(self, order_id: str) -> Optional[Order]:
        return self.orders.get(order_id)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def customers_repository():
    return InMemoryCustomersRepository()


@pytest.fixture
def products_repository():
    return InMemoryProductsRepository()


@pytest.fixture
def orders_repository():
    return InMemoryOrdersRepository()


@pytest.fixture
def customer(customers_repository):
    """Registered customer c1"""
    return customers_repository.add(
        Customer(id="c1", name="Ana Rojas", email="ana@example.com", created_at=_now())
    )


@pytest.fixture
def catalog(products_repository):
    """
    Provides a small catalog:
        p1: price 10.00, stock 5
        p2: price 2.50, stock 100
        p3: price 7.90, stock 1
    """
    for product_id, name, price, quantity in [
        ("p1", "Granola 500g", Decimal("10.00"), 5),
        ("p2", "Barra Cacao", Decimal("2.50"), 100),
        ("p3", "Crackers Sesamo", Decimal("7.90"), 1),
    ]:
        products_repository.add(
            Product(id=product_id, name=name, price=price, quantity=quantity, created_at=_now())
        )
    return products_repository


@pytest.fixture
def create_order_service(orders_repository, products_repository, customers_repository):
    return CreateOrderService(
        orders_repository=orders_repository,
        products_repository=products_repository,
        customers_repository=customers_repository,
    )


@pytest.fixture(scope="session")
def database_url():
    """
    Provides the database URL for integration tests

    Scope: session (created once per test session)
    """
    url = os.getenv("DATABASE_URL")
    if not url:
        pytest.skip("DATABASE_URL not configured")
    return url
