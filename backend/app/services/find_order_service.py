"""
Find Order Service
"""
import logging

from app.core.errors import OrderNotFound
from app.domain.order import Order
from app.repositories.interfaces import IOrdersRepository

logger = logging.getLogger(__name__)


class FindOrderService:
    """Service for fetching a stored order with its line items"""

    def __init__(self, orders_repository: IOrdersRepository):
        self.orders_repository = orders_repository

    def execute(self, order_id: str) -> Order:
        order = self.orders_repository.find_by_id(order_id)

        if not order:
            logger.warning(f"[Order: {order_id}] Not found")
            raise OrderNotFound(order_id)

        return order
