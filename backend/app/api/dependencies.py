"""
FastAPI dependency providers

Build repositories and services per request. Tests replace the repository
providers through `app.dependency_overrides`.
"""
from fastapi import Depends

from app.repositories.interfaces import (
    ICustomersRepository,
    IOrdersRepository,
    IProductsRepository,
)
from app.repositories.customer_repository import CustomerRepository
from app.repositories.order_repository import OrderRepository
from app.repositories.product_repository import ProductRepository
from app.services.create_order_service import CreateOrderService
from app.services.customer_service import CreateCustomerService
from app.services.find_order_service import FindOrderService
from app.services.product_service import CreateProductService


def get_customers_repository() -> ICustomersRepository:
    return CustomerRepository()


def get_products_repository() -> IProductsRepository:
    return ProductRepository()


def get_orders_repository() -> IOrdersRepository:
    return OrderRepository()


def get_create_order_service(
    orders_repository: IOrdersRepository = Depends(get_orders_repository),
    products_repository: IProductsRepository = Depends(get_products_repository),
    customers_repository: ICustomersRepository = Depends(get_customers_repository),
) -> CreateOrderService:
    return CreateOrderService(
        orders_repository=orders_repository,
        products_repository=products_repository,
        customers_repository=customers_repository,
    )


def get_find_order_service(
    orders_repository: IOrdersRepository = Depends(get_orders_repository),
) -> FindOrderService:
    return FindOrderService(orders_repository)


def get_create_customer_service(
    customers_repository: ICustomersRepository = Depends(get_customers_repository),
) -> CreateCustomerService:
    return CreateCustomerService(customers_repository)


def get_create_product_service(
    products_repository: IProductsRepository = Depends(get_products_repository),
) -> CreateProductService:
    return CreateProductService(products_repository)
