"""
Create Order Service
Validates a customer's order request, stores the order and decrements stock

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Dict, List

from app.core.errors import InvalidCustomer, ProductsNotFound, InsufficientStock
from app.domain.order import Order, OrderProduct, OrderProductRequest
from app.domain.product import Product
from app.repositories.interfaces import (
    ICustomersRepository,
    IOrdersRepository,
    IProductsRepository,
)

logger = logging.getLogger(__name__)


class CreateOrderService:
    """
    Service for placing a new order

    Steps, stopping at the first failure:
    1. Resolve the customer
    2. Fetch every requested product in one batch
    3. Reject requests referencing unknown products
    4. Reject requests whose quantities, summed per product, exceed stock
       (all offenders reported)
    5. Build line items with the current catalog price
    6. Store the order and its line items
    7. Write back the decremented stock

    Nothing is written before step 6. Repository errors are not caught.
    Steps 4 and 7 are not isolated from concurrent orders: two requests
    for the same product can both pass the stock check.
    """

    def __init__(
        self,
        orders_repository: IOrdersRepository,
        products_repository: IProductsRepository,
        customers_repository: ICustomersRepository,
    ):
        self.orders_repository = orders_repository
        self.products_repository = products_repository
        self.customers_repository = customers_repository

    def execute(self, customer_id: str, products: List[OrderProductRequest]) -> Order:
        """
        Place an order

        Args:
            customer_id: ID of the customer placing the order
            products: Requested (product id, quantity) lines

        Returns:
            The stored Order

        Raises:
            InvalidCustomer: customer_id does not resolve
            ProductsNotFound: no product, or not every product, was found
            InsufficientStock: stock is below the requested quantity
        """
        log_prefix = f"[Customer: {customer_id}]"
        logger.info(f"{log_prefix} Creating order with {len(products)} lines")

        customer = self.customers_repository.find_by_id(customer_id)
        if not customer:
            logger.warning(f"{log_prefix} Rejected: customer not found")
            raise InvalidCustomer(customer_id)

        requested_ids = [product.id for product in products]
        existing_products = self.products_repository.find_all_by_id(requested_ids)

        if not existing_products:
            logger.warning(f"{log_prefix} Rejected: none of the products exist")
            raise ProductsNotFound([])

        catalog: Dict[str, Product] = {product.id: product for product in existing_products}

        not_found_ids = _unique([
            product_id for product_id in requested_ids if product_id not in catalog
        ])
        if not_found_ids:
            logger.warning(f"{log_prefix} Rejected: products not found {not_found_ids}")
            raise ProductsNotFound(not_found_ids)

        # Repeated ids draw on the same stock
        requested_totals = _requested_totals(products)

        under_stock_ids = [
            product_id for product_id, quantity in requested_totals.items()
            if not catalog[product_id].has_stock_for(quantity)
        ]
        if under_stock_ids:
            logger.warning(f"{log_prefix} Rejected: insufficient stock for {under_stock_ids}")
            raise InsufficientStock(under_stock_ids)

        order_products = [
            OrderProduct(
                product_id=product.id,
                quantity=product.quantity,
                price=_catalog_product(catalog, product.id).price,
            )
            for product in products
        ]

        order = self.orders_repository.create(customer, order_products)
        logger.info(f"{log_prefix} Order {order.id} stored")

        ordered_products_quantity = [
            (product_id, _catalog_product(catalog, product_id).quantity - quantity)
            for product_id, quantity in requested_totals.items()
        ]
        self.products_repository.update_quantities(ordered_products_quantity)
        logger.info(f"{log_prefix} Stock updated for order {order.id}")

        return order


def _catalog_product(catalog: Dict[str, Product], product_id: str) -> Product:
    # Every requested id was checked against the catalog before this is called
    try:
        return catalog[product_id]
    except KeyError:
        raise RuntimeError(f"Product {product_id} missing from validated catalog") from None


def _requested_totals(products: List[OrderProductRequest]) -> Dict[str, int]:
    """Sum requested quantities per product id, keeping first-seen order"""
    totals: Dict[str, int] = {}
    for product in products:
        totals[product.id] = totals.get(product.id, 0) + product.quantity
    return totals


def _unique(ids: List[str]) -> List[str]:
    """Drop repeated ids, keeping first-seen order"""
    return list(dict.fromkeys(ids))
